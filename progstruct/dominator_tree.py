"""Dominance relation, dominator tree and dominance frontiers of a CFG."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Set, Tuple

logger = logging.getLogger(__name__)


class DirectedGraphNode(ABC):
    """A node in a directed graph whose neighbours are given by index."""

    @abstractmethod
    def index(self) -> int:
        """Return the index of the node."""

    @abstractmethod
    def predecessors(self) -> Set[int]:
        """Return the indices of the node's predecessors."""

    @abstractmethod
    def successors(self) -> Set[int]:
        """Return the indices of the node's successors."""


class DominatorTree:
    """The dominance relation of a graph whose entry node has index 0."""

    def __init__(self, basic_blocks: Sequence[DirectedGraphNode]) -> None:
        if not basic_blocks:
            raise ValueError("cannot build a dominator tree for an empty graph")
        self._dominators = _compute_dominators(basic_blocks)
        self._immediate_dominators, self._dominator_successors = (
            _compute_immediate_dominators(self._dominators)
        )
        self._dominance_frontier = _compute_dominance_frontier(
            basic_blocks, self._immediate_dominators
        )

    def entry_block(self) -> int:
        """Return the index of the entry block."""
        return 0

    def get_dominators(self, index: int) -> Set[int]:
        """Return the set of blocks dominating the given block."""
        return set(self._dominators[index])

    def get_immediate_dominator(self, index: int) -> Optional[int]:
        """Return the immediate dominator of the block, or None for the entry."""
        return self._immediate_dominators[index]

    def get_dominator_successors(self, index: int) -> Set[int]:
        """Return the children of the block in the dominator tree."""
        return set(self._dominator_successors[index])

    def get_dominance_frontier(self, index: int) -> Set[int]:
        """Return the dominance frontier of the block."""
        return set(self._dominance_frontier[index])


def _compute_dominators(basic_blocks: Sequence[DirectedGraphNode]) -> List[Set[int]]:
    # Simple iterative data-flow analysis.
    count = len(basic_blocks)
    everything = set(range(count))
    dominators: List[Set[int]] = [{0}] + [set(everything) for _ in range(1, count)]
    changed = True
    while changed:
        changed = False
        for i in range(1, count):
            new_dominators = set(everything)
            for j in basic_blocks[i].predecessors():
                new_dominators &= dominators[j]
            new_dominators.add(i)
            if new_dominators != dominators[i]:
                dominators[i] = new_dominators
                changed = True
    return dominators


def _compute_immediate_dominators(
    dominators: List[Set[int]],
) -> Tuple[List[Optional[int]], List[Set[int]]]:
    count = len(dominators)
    immediate: List[Optional[int]] = [None] * count
    children: List[Set[int]] = [set() for _ in range(count)]

    for i, dominator_set in enumerate(dominators):
        logger.debug("the dominator set of block %d is %s", i, dominator_set)
        candidates = dominator_set - {i}
        if len(candidates) > 1:
            # Every strict dominator of a strict dominator of `i` is ruled out;
            # what remains is the unique immediate dominator.
            strict_up_set: Set[int] = set()
            for j in candidates:
                if j not in strict_up_set:
                    strict_up_set |= dominators[j] - {j}
            candidates -= strict_up_set
            if len(candidates) > 1:
                raise ValueError(f"block {i} has no unique immediate dominator")
        if candidates:
            (j,) = candidates
            logger.debug("the immediate dominator of %d is %d", i, j)
            immediate[i] = j
            children[j].add(i)
    return immediate, children


def _compute_dominance_frontier(
    basic_blocks: Sequence[DirectedGraphNode],
    immediate_dominators: List[Optional[int]],
) -> List[Set[int]]:
    frontier: List[Set[int]] = [set() for _ in basic_blocks]
    for i, block in enumerate(basic_blocks):
        predecessors = block.predecessors()
        if len(predecessors) <= 1:
            continue
        for j in predecessors:
            k: Optional[int] = j
            while k is not None and k != immediate_dominators[i]:
                frontier[k].add(i)
                k = immediate_dominators[k]
    return frontier