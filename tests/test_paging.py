import io

import pytest

from algodrills.paging import REFERENCE_STRING, fifo, lru, main, opt

STRINGS = [
    list(REFERENCE_STRING),
    [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5],
    [5, 5, 1, 2, 5, 3, 1, 4, 2, 2, 6, 1],
]


def test_reference_string_fifo_faults():
    assert fifo(REFERENCE_STRING, 3).faults == 15


def test_reference_string_lru_faults():
    assert lru(REFERENCE_STRING, 3).faults == 12


def test_reference_string_opt_faults():
    assert opt(REFERENCE_STRING, 3).faults == 9


@pytest.mark.parametrize("pages", STRINGS)
@pytest.mark.parametrize("frames", [1, 2, 3, 4])
def test_opt_never_worse(pages, frames):
    best = opt(pages, frames).faults
    assert best <= lru(pages, frames).faults
    assert best <= fifo(pages, frames).faults


@pytest.mark.parametrize("policy", [fifo, lru, opt])
@pytest.mark.parametrize("pages", STRINGS)
def test_snapshots_are_consistent(policy, pages):
    frames = 3
    result = policy(pages, frames)
    assert len(result.snapshots) == len(pages)
    for page, snapshot in zip(pages, result.snapshots):
        assert page in snapshot
        assert len(snapshot) <= frames
        assert len(set(snapshot)) == len(snapshot)
    assert result.faults == len(result.evictions) + min(frames, len(set(pages)))
    assert result.fault_rate == result.faults / len(pages)


@pytest.mark.parametrize("policy", [fifo, lru, opt])
def test_enough_frames_only_compulsory_faults(policy):
    pages = STRINGS[1]
    result = policy(pages, len(set(pages)))
    assert result.faults == len(set(pages))
    assert result.evictions == ()


@pytest.mark.parametrize("pages", STRINGS)
@pytest.mark.parametrize("frames", [1, 2, 3])
def test_lru_more_frames_never_hurts(pages, frames):
    assert lru(pages, frames + 1).faults <= lru(pages, frames).faults


def test_fifo_shows_beladys_anomaly():
    pages = STRINGS[1]
    assert fifo(pages, 4).faults > fifo(pages, 3).faults


@pytest.mark.parametrize("policy", [fifo, lru, opt])
def test_empty_reference_string(policy):
    result = policy([], 3)
    assert result.faults == 0
    assert result.fault_rate == 0.0


@pytest.mark.parametrize("policy", [fifo, lru, opt])
def test_rejects_zero_frames(policy):
    with pytest.raises(ValueError):
        policy([1, 2], 0)


def test_main_runs_chosen_policy(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"FIFO: fault rate {fifo(REFERENCE_STRING, 3).fault_rate:f}" in out
    assert f"OPT: fault rate {opt(REFERENCE_STRING, 3).fault_rate:f}" in out


def test_main_uses_given_pages(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main(["--frames", "2", "1", "2", "3", "1"]) == 0
    out = capsys.readouterr().out
    assert f"LRU: fault rate {lru([1, 2, 3, 1], 2).fault_rate:f}" in out


def test_main_reports_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n0\n"))
    assert main([]) == 0
    assert "invalid choice" in capsys.readouterr().out


def test_main_rejects_zero_frames():
    with pytest.raises(SystemExit):
        main(["--frames", "0"])