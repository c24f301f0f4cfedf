"""Errors raised while converting a control-flow graph to SSA form."""

from __future__ import annotations

from typing import Any, Optional


class SSAError(Exception):
    """Base class for errors raised during SSA generation."""


class UndefinedVariableError(SSAError):
    """A variable is read before it is declared or written."""

    def __init__(self, name: str, file_id: Optional[int], location: Any) -> None:
        self.name = name
        self.file_id = file_id
        self.location = location
        super().__init__(f"The variable `{name}` is used before it is defined.")

    @property
    def primary_message(self) -> str:
        """Return the message attached to the location where the variable is seen."""
        return f"The variable `{self.name}` is first seen here."