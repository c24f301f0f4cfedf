# progstruct

Building blocks for static analysis of programs over a control-flow graph.

## Modules

- `progstruct.dominator_tree`: `DominatorTree(basic_blocks)` computes
  dominators, immediate dominators, the dominator tree and dominance
  frontiers for any sequence of nodes implementing `DirectedGraphNode`
  (`index()`, `predecessors()`, `successors()`, the last two returning sets
  of indices). Block 0 is the entry block. An empty sequence raises
  `ValueError`. Queries: `entry_block()`, `get_dominators(i)`,
  `get_immediate_dominator(i)` (`None` for the entry),
  `get_dominator_successors(i)` and `get_dominance_frontier(i)`.
- `progstruct.ssa_traits`: abstract base classes a CFG implements to be
  converted into SSA form: `SSAEnvironment` (`add_variable_scope`,
  `remove_variable_scope`), `SSAStatement` (phi-statement creation and
  queries, `ensure_phi_argument`, `insert_ssa_variables`) and `SSABasicBlock`,
  which supplies `variables_written`, `has_phi_statement`,
  `insert_phi_statement`, `update_phi_statements` and `insert_ssa_variables`
  on top of `statements()` and `prepend_statement()`. A block subclass sets
  `statement_class` to the statement type used to create phi statements.
- `progstruct.ssa`: `insert_phi_statements(blocks, tree, env)` places phi
  statements at the dominance frontiers of blocks that write variables;
  `insert_ssa_variables(blocks, tree, env)` walks the dominator tree in
  pre-order, renaming variables in each block and filling in phi arguments of
  CFG successors, opening a variable scope for each dominator-tree child.
- `progstruct.ssa_errors`: `SSAError` and `UndefinedVariableError(name,
  file_id, location)`, for implementations to raise when a variable is read
  before it is defined.
- `progstruct.environment`: `Environment`, a symbol table with a stack of
  variable blocks (innermost lookup first) plus components and input, output
  and intermediate signals. `Environment.merge(left, right, using)` combines
  two environments. Missing symbols raise `NonExistentSymbolError`, a
  `KeyError`.
- `progstruct.nonempty`: `NonEmptyList`, a list that always holds at least
  one element; `pop()` returns `None` instead of removing the last one.
- `progstruct.constants`: `Curve` (`BN128`, `BLS12_381`, `GOLDILOCKS`) with
  `Curve.parse(text)` (case-insensitive, `ValueError` otherwise) and
  `prime()`, and `UsefulConstants(curve)` with `curve()`, `prime()` and
  `prime_size()`.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Example

    from progstruct.dominator_tree import DominatorTree

    tree = DominatorTree(blocks)          # blocks[i].index() == i
    tree.get_immediate_dominator(3)       # e.g. 0
    tree.get_dominance_frontier(1)        # e.g. {3}

    from progstruct.constants import Curve, UsefulConstants

    constants = UsefulConstants(Curve.parse("bn128"))
    constants.prime_size()                # 254

    from progstruct.nonempty import NonEmptyList

    items = NonEmptyList(1)
    items.push(2)
    items.pop()                           # 2
    items.pop()                           # None: the last element stays

## What it does not do

The package has no parser and does not build control-flow graphs from
program text: you supply the blocks and statements by implementing the
interfaces in `progstruct.ssa_traits`. It has no command-line tool and does
not produce analysis reports or write them to files in any format.