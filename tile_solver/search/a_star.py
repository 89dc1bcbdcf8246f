from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Set, Tuple
from time import perf_counter
import heapq
import itertools
import logging

from tile_solver.domains.board import Board, State
from tile_solver.heuristics.cost import is_solved

logger = logging.getLogger(__name__)

DEDUP_MODES = ("state", "path")
TIE_BREAKS = ("fifo", "lifo", "h", "g")
PROGRESS_EVERY = 10000


def _result(path: Optional[str], expanded: int, generated: int, duplicates: int,
            peak_open: int, t0: float, dedup: str, tie_break: str, termination: str) -> dict:
    return {
        "path": path,
        "g": len(path) if path is not None else None,
        "expanded": expanded,
        "generated": generated,
        "duplicates": duplicates,
        "peak_open": peak_open,
        "time": perf_counter() - t0,
        "algorithm": "A*",
        "dedup": dedup,
        "tie_break": tie_break,
        "termination": termination,
    }


def a_star(
    start: Board,
    goal: Board,
    dedup: str = "state",
    tie_break: str = "fifo",
    max_expansions: Optional[int] = None,
    timeout_sec: Optional[float] = None,
):
    """
    Best-first search over Boards ordered by f = depth + Manhattan + linear conflicts.

    dedup="state" suppresses a child whose permutation was already reached at the
    same or a smaller depth; dedup="path" only suppresses repeated move strings.
    Returns a dict with the move string under "path" plus search counters.
    """
    if dedup not in DEDUP_MODES:
        raise ValueError(f"unknown dedup mode {dedup!r}")
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"unknown tie_break {tie_break!r}")

    t0 = perf_counter()
    counter = itertools.count()

    def priority_tuple(node: Board, ctr: int) -> Tuple[int, int, int]:
        if tie_break == "h":    return (node.cost, node.cost - node.depth, ctr)
        if tie_break == "g":    return (node.cost, -node.depth, ctr)
        if tie_break == "lifo": return (node.cost, 0, -ctr)
        return (node.cost, 0, ctr)

    if start.goal is not goal:
        start = start.copy()
        start.goal = goal
    start.update_cost()

    open_heap: List[Tuple[Tuple[int, int, int], Board]] = []
    heapq.heappush(open_heap, (priority_tuple(start, next(counter)), start))

    best_depth: Dict[State, int] = {start.key(): start.depth}
    seen_paths: Set[str] = {start.path}

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1

    logger.info("A* start: n=%d cost=%d dedup=%s", start.n, start.cost, dedup)

    while open_heap:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            logger.info("A* timeout after %d expansions", expanded)
            return _result(None, expanded, generated, duplicates, peak_open, t0, dedup, tie_break, "timeout")
        if max_expansions is not None and expanded >= max_expansions:
            logger.info("A* expansion budget %d exhausted", max_expansions)
            return _result(None, expanded, generated, duplicates, peak_open, t0, dedup, tie_break, "budget")

        peak_open = max(peak_open, len(open_heap))
        _, node = heapq.heappop(open_heap)

        # A cheaper route to this permutation was pushed after this entry
        if dedup == "state" and node.depth > best_depth[node.key()]:
            continue

        if is_solved(node, goal):
            logger.info("A* solved: %d moves, %d expanded", node.depth, expanded)
            return _result(node.path, expanded, generated, duplicates, peak_open, t0, dedup, tie_break, "ok")

        expanded += 1
        if expanded % PROGRESS_EVERY == 0:
            logger.debug("expanded=%d open=%d f=%d depth=%d", expanded, len(open_heap), node.cost, node.depth)

        for direction in node.available_moves():
            generated += 1
            if dedup == "path":
                path = node.path + direction
                if path in seen_paths:
                    duplicates += 1
                    continue
                child = node.child(direction)
                seen_paths.add(path)
            else:
                child = node.child(direction)
                k = child.key()
                prev = best_depth.get(k)
                if prev is not None:
                    duplicates += 1
                    if prev <= child.depth:
                        continue
                best_depth[k] = child.depth
            heapq.heappush(open_heap, (priority_tuple(child, next(counter)), child))

    logger.info("A* frontier exhausted after %d expansions", expanded)
    return _result(None, expanded, generated, duplicates, peak_open, t0, dedup, tie_break, "exhausted")


def solve_tiles(n: int, symbols: Sequence[int], **kwargs) -> dict:
    """Build the goal and start boards from plain symbols and run a_star."""
    goal = Board(n, None, -1)
    start = Board.from_symbols(n, symbols, goal, 0)
    return a_star(start, goal, **kwargs)
