"""Generic conversion of a control-flow graph into static single assignment form."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .dominator_tree import DominatorTree
from .ssa_traits import SSABasicBlock, SSAEnvironment

logger = logging.getLogger(__name__)


def insert_phi_statements(
    basic_blocks: Sequence[SSABasicBlock],
    dominator_tree: DominatorTree,
    env: SSAEnvironment,
) -> None:
    """Insert empty phi statements at the dominance frontier of every writing block."""
    work_list: List[int] = list(range(len(basic_blocks)))
    while work_list:
        current_index = work_list.pop()
        written = basic_blocks[current_index].variables_written()
        if not written:
            logger.debug("basic block %d does not write any variables", current_index)
            continue
        frontier = dominator_tree.get_dominance_frontier(current_index)
        logger.debug("dominance frontier for block %d is %s", current_index, frontier)
        for frontier_index in sorted(frontier):
            frontier_block = basic_blocks[frontier_index]
            for var in written:
                if not frontier_block.has_phi_statement(var):
                    # The block now writes a new variable, so revisit it.
                    frontier_block.insert_phi_statement(var, env)
                    work_list.append(frontier_index)


def insert_ssa_variables(
    basic_blocks: Sequence[SSABasicBlock],
    dominator_tree: DominatorTree,
    env: SSAEnvironment,
) -> None:
    """Rename variables to SSA versions, walking the dominator tree in pre-order.

    Phi arguments in CFG successors are filled in as each block is visited.
    """
    _insert_ssa_variables(0, basic_blocks, dominator_tree, env)


def _block(basic_blocks: Sequence[SSABasicBlock], index: int) -> SSABasicBlock:
    if not 0 <= index < len(basic_blocks):
        raise IndexError(f"invalid block index {index} during SSA generation")
    return basic_blocks[index]


def _insert_ssa_variables(
    current_index: int,
    basic_blocks: Sequence[SSABasicBlock],
    dominator_tree: DominatorTree,
    env: SSAEnvironment,
) -> None:
    current_block = _block(basic_blocks, current_index)
    current_block.insert_ssa_variables(env)
    for successor_index in sorted(current_block.successors()):
        _block(basic_blocks, successor_index).update_phi_statements(env)
    for child_index in sorted(dominator_tree.get_dominator_successors(current_index)):
        env.add_variable_scope()
        try:
            _insert_ssa_variables(child_index, basic_blocks, dominator_tree, env)
        finally:
            env.remove_variable_scope()