"""Interfaces that a CFG must implement to be converted into SSA form."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterable, Set

from .dominator_tree import DirectedGraphNode

logger = logging.getLogger(__name__)


class SSAEnvironment(ABC):
    """Tracks variable versions across a CFG."""

    @abstractmethod
    def add_variable_scope(self) -> None:
        """Enter a variable scope."""

    @abstractmethod
    def remove_variable_scope(self) -> None:
        """Leave a variable scope."""


class SSAStatement(ABC):
    """A statement of the language being converted."""

    @abstractmethod
    def variables_written(self) -> Set[Hashable]:
        """Return the set of variables written by the statement."""

    @classmethod
    @abstractmethod
    def new_phi_statement(cls, var: Hashable, env: SSAEnvironment) -> "SSAStatement":
        """Return a new phi statement with an empty argument list for the variable."""

    @abstractmethod
    def is_phi_statement(self) -> bool:
        """Return True if the statement is a phi statement."""

    @abstractmethod
    def is_phi_statement_for(self, var: Hashable) -> bool:
        """Return True if the statement is a phi statement for the variable."""

    @abstractmethod
    def ensure_phi_argument(self, env: SSAEnvironment) -> None:
        """Make sure the phi arguments contain the variable's current version."""

    @abstractmethod
    def insert_ssa_variables(self, env: SSAEnvironment) -> None:
        """Replace each variable in the statement with its versioned SSA variable."""


class SSABasicBlock(DirectedGraphNode):
    """A basic block holding a possibly empty list of statements.

    Subclasses set ``statement_class`` to the statement type whose
    ``new_phi_statement`` creates phi statements for the block.
    """

    statement_class: type

    @abstractmethod
    def index(self) -> int:
        """Return the index of the block."""

    @abstractmethod
    def predecessors(self) -> Set[int]:
        """Return the indices of the block's predecessors."""

    @abstractmethod
    def successors(self) -> Set[int]:
        """Return the indices of the block's successors."""

    @abstractmethod
    def statements(self) -> Iterable[SSAStatement]:
        """Return the statements of the block in order."""

    @abstractmethod
    def prepend_statement(self, stmt: SSAStatement) -> None:
        """Add the statement to the front of the block."""

    def variables_written(self) -> Set[Hashable]:
        """Return the set of variables written by the block."""
        written: Set[Hashable] = set()
        for stmt in self.statements():
            written |= stmt.variables_written()
        return written

    def has_phi_statement(self, var: Hashable) -> bool:
        """Return True if the block has a phi statement for the variable."""
        return any(stmt.is_phi_statement_for(var) for stmt in self.statements())

    def insert_phi_statement(self, var: Hashable, env: SSAEnvironment) -> None:
        """Insert a new phi statement for the variable at the top of the block."""
        self.prepend_statement(self.statement_class.new_phi_statement(var, env))

    def update_phi_statements(self, env: SSAEnvironment) -> None:
        """Add the current variable versions to the block's phi statements."""
        logger.debug("updating phi expression arguments in block %d", self.index())
        for stmt in self.statements():
            # Phi statements precede all other statements.
            if not stmt.is_phi_statement():
                break
            stmt.ensure_phi_argument(env)

    def insert_ssa_variables(self, env: Any) -> None:
        """Rename every variable in the block to its SSA version."""
        logger.debug("inserting SSA variables in block %d", self.index())
        for stmt in self.statements():
            stmt.insert_ssa_variables(env)