"""Page replacement simulations: FIFO, least recently used and optimal."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import cycle

REFERENCE_STRING = (7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1)
DEFAULT_FRAMES = 3

VictimChooser = Callable[[list[int], list[int], int], int]


@dataclass(frozen=True)
class PagingResult:
    """Outcome of running a reference string through a replacement policy."""

    faults: int
    requests: int
    evictions: tuple[int, ...]
    snapshots: tuple[tuple[int, ...], ...]

    @property
    def fault_rate(self) -> float:
        """Faults per request; 0.0 for an empty reference string."""
        return self.faults / self.requests if self.requests else 0.0


def _simulate(pages: Iterable[int], frames: int, choose_victim: VictimChooser) -> PagingResult:
    if frames < 1:
        raise ValueError("there must be at least one frame")
    sequence = list(pages)
    resident: list[int] = []
    faults = 0
    evictions: list[int] = []
    snapshots: list[tuple[int, ...]] = []
    for position, page in enumerate(sequence):
        if page not in resident:
            faults += 1
            if len(resident) < frames:
                resident.append(page)
            else:
                slot = choose_victim(resident, sequence, position)
                evictions.append(resident[slot])
                resident[slot] = page
        snapshots.append(tuple(resident))
    return PagingResult(faults, len(sequence), tuple(evictions), tuple(snapshots))


def fifo(pages: Iterable[int], frames: int) -> PagingResult:
    """Replace frames in the order they were filled."""
    pointer = cycle(range(frames)) if frames > 0 else iter(())
    return _simulate(pages, frames, lambda _resident, _sequence, _position: next(pointer))


def _least_recent(resident: list[int], sequence: list[int], position: int) -> int:
    last_use = {page: index for index, page in enumerate(sequence[:position])}
    return min(range(len(resident)), key=lambda slot: last_use[resident[slot]])


def lru(pages: Iterable[int], frames: int) -> PagingResult:
    """Replace the page whose last use lies furthest in the past."""
    return _simulate(pages, frames, _least_recent)


def _furthest_next_use(resident: list[int], sequence: list[int], position: int) -> int:
    def next_use(slot: int) -> float:
        try:
            return sequence.index(resident[slot], position + 1)
        except ValueError:
            return math.inf

    return max(range(len(resident)), key=next_use)


def opt(pages: Iterable[int], frames: int) -> PagingResult:
    """Replace the page needed furthest in the future; unused pages go first, lowest frame first."""
    return _simulate(pages, frames, _furthest_next_use)


_ALGORITHMS = {"1": ("FIFO", fifo), "2": ("LRU", lru), "3": ("OPT", opt)}


def _show(name: str, result: PagingResult) -> None:
    for snapshot in result.snapshots:
        print("frames: " + " ".join(str(page) for page in snapshot))
    print("evicted pages: " + " ".join(str(page) for page in result.evictions))
    print(f"{name}: fault rate {result.fault_rate:f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Repeatedly ask which policy to run over the reference string until 0 or end of input."""
    parser = argparse.ArgumentParser(description="Simulate page replacement policies.")
    parser.add_argument("pages", nargs="*", type=int, help="page reference string")
    parser.add_argument("--frames", type=int, default=DEFAULT_FRAMES, help="number of frames")
    args = parser.parse_args(argv)
    if args.frames < 1:
        parser.error("--frames must be at least 1")
    pages = args.pages or list(REFERENCE_STRING)
    while True:
        print("input the type: 1.FIFO  2.LRU  3.OPT  0.quit:")
        line = sys.stdin.readline()
        if not line:
            break
        choice = line.strip()
        if choice == "0":
            print("quit")
            break
        if choice not in _ALGORITHMS:
            print("invalid choice")
            continue
        name, algorithm = _ALGORITHMS[choice]
        _show(name, algorithm(pages, args.frames))
    return 0