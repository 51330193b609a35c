"""Path enumeration in a DAG, Dijkstra's shortest path and Prim's minimum spanning tree."""

from __future__ import annotations

import heapq
import math
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

Edge = tuple[int, int, int]


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Every path from node 0 to the last node in an adjacency-list DAG."""
    if not graph:
        return []
    size = len(graph)
    target = size - 1
    for neighbours in graph:
        for node in neighbours:
            if not 0 <= node < size:
                raise ValueError(f"edge to unknown node {node}")
    result: list[list[int]] = []
    path = [0]

    def visit(node: int) -> None:
        if node == target:
            result.append(path.copy())
        for nxt in graph[node]:
            path.append(nxt)
            visit(nxt)
            path.pop()

    visit(0)
    return result


def _adjacency(count: int, edges: Iterable[Edge], undirected: bool) -> list[dict[int, int]]:
    adjacency: list[dict[int, int]] = [{} for _ in range(count + 1)]
    for source, dest, weight in edges:
        if not (1 <= source <= count and 1 <= dest <= count):
            raise ValueError(f"edge ({source}, {dest}) names a node outside 1..{count}")
        adjacency[source][dest] = weight
        if undirected:
            adjacency[dest][source] = weight
    return adjacency


def dijkstra(n: int, edges: Iterable[Edge]) -> int:
    """Shortest distance from node 1 to node ``n`` over directed weighted edges.

    A later edge between the same pair replaces an earlier one. Returns -1 when
    node ``n`` cannot be reached.
    """
    if n < 1:
        raise ValueError("there must be at least one node")
    adjacency = _adjacency(n, edges, undirected=False)
    if any(weight < 0 for links in adjacency for weight in links.values()):
        raise ValueError("edge weights must not be negative")
    best = {1: 0}
    heap = [(0, 1)]
    done: set[int] = set()
    while heap:
        distance, node = heapq.heappop(heap)
        if node in done:
            continue
        if node == n:
            return distance
        done.add(node)
        for nxt, weight in adjacency[node].items():
            candidate = distance + weight
            if nxt not in done and candidate < best.get(nxt, math.inf):
                best[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return -1


def dijkstra_from_file(path: str | os.PathLike[str]) -> int:
    """Run :func:`dijkstra` on a file holding ``n m`` followed by ``m`` edge triples."""
    tokens = Path(path).read_text().split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as error:
        raise ValueError(f"malformed graph file {path}") from error
    if len(numbers) < 2:
        raise ValueError(f"graph file {path} lacks a header")
    n, m = numbers[0], numbers[1]
    body = numbers[2:2 + 3 * m]
    if m < 0 or len(body) < 3 * m:
        raise ValueError(f"graph file {path} holds fewer than {m} edges")
    edges = [(body[i], body[i + 1], body[i + 2]) for i in range(0, 3 * m, 3)]
    return dijkstra(n, edges)


def prim(vertex_count: int, edges: Iterable[Edge]) -> int:
    """Total weight of a minimum spanning tree over nodes 1..vertex_count.

    Edges are undirected; a later edge between the same pair replaces an earlier one.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency = _adjacency(vertex_count, edges, undirected=True)
    if vertex_count == 0:
        return 0
    min_dist = [math.inf] * (vertex_count + 1)
    min_dist[1] = 0
    in_tree: set[int] = set()
    for _ in range(vertex_count):
        current = min(
            (node for node in range(1, vertex_count + 1) if node not in in_tree),
            key=min_dist.__getitem__,
        )
        if min_dist[current] == math.inf:
            raise ValueError("graph is not connected")
        in_tree.add(current)
        for nxt, weight in adjacency[current].items():
            if nxt not in in_tree and weight < min_dist[nxt]:
                min_dist[nxt] = weight
    return sum(min_dist[2:])