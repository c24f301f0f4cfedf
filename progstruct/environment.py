"""Scoped symbol tables for variables, signals and components."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple


class NonExistentSymbolError(KeyError):
    """Raised when a symbol is looked up that the environment does not hold."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"the symbol `{self.symbol}` does not exist"


def _union(
    left: Dict[str, Any], right: Dict[str, Any], using: Callable[[Any, Any], Any]
) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in left.items():
        result[key] = using(value, right[key]) if key in right else value
    for key, value in right.items():
        result.setdefault(key, value)
    return result


class Environment:
    """Holds components, input/output/intermediate signals and scoped variables.

    Variables live in a stack of blocks; lookups search from the innermost
    block outwards.
    """

    def __init__(self) -> None:
        self._components: Dict[str, Any] = {}
        self._inputs: Dict[str, Any] = {}
        self._outputs: Dict[str, Any] = {}
        self._intermediates: Dict[str, Any] = {}
        self._variables: List[Dict[str, Any]] = [{}]

    @classmethod
    def merge(
        cls,
        left: "Environment",
        right: "Environment",
        using: Callable[[Any, Any], Any],
    ) -> "Environment":
        """Merge two environments.

        Components and signals from ``right`` take precedence. Variable blocks
        are paired from the innermost outwards and variables present in both
        are combined with ``using``; unpaired outer blocks are dropped.
        """
        result = cls()
        result._components = {**left._components, **right._components}
        result._inputs = {**left._inputs, **right._inputs}
        result._outputs = {**left._outputs, **right._outputs}
        result._intermediates = {**left._intermediates, **right._intermediates}
        merged = [
            _union(left_block, right_block, using)
            for left_block, right_block in zip(
                reversed(left._variables), reversed(right._variables)
            )
        ]
        merged.reverse()
        result._variables = merged
        return result

    def has_symbol(self, symbol: str) -> bool:
        """Return True if the symbol is a signal, a component or a variable."""
        return (
            self.has_signal(symbol)
            or self.has_component(symbol)
            or self.has_variable(symbol)
        )

    # Variables.

    def _block_with_variable(self, symbol: str) -> Optional[Dict[str, Any]]:
        for block in reversed(self._variables):
            if symbol in block:
                return block
        return None

    def add_variable_block(self) -> None:
        """Open a new innermost variable scope."""
        self._variables.append({})

    def remove_variable_block(self) -> None:
        """Close the innermost variable scope."""
        if not self._variables:
            raise IndexError("no variable block to remove")
        self._variables.pop()

    def add_variable(self, name: str, content: Any) -> None:
        """Declare a variable in the innermost scope."""
        if not self._variables:
            raise IndexError("no variable block to add the variable to")
        self._variables[-1][name] = content

    def has_variable(self, symbol: str) -> bool:
        """Return True if some scope declares the variable."""
        return self._block_with_variable(symbol) is not None

    def get_variable(self, symbol: str) -> Any:
        """Return the innermost value of the variable."""
        block = self._block_with_variable(symbol)
        if block is None:
            raise NonExistentSymbolError(symbol)
        return block[symbol]

    def set_variable(self, symbol: str, content: Any) -> None:
        """Replace the value of the innermost declaration of the variable."""
        block = self._block_with_variable(symbol)
        if block is None:
            raise NonExistentSymbolError(symbol)
        block[symbol] = content

    def remove_variable(self, symbol: str) -> None:
        """Remove the innermost declaration of the variable, if any."""
        block = self._block_with_variable(symbol)
        if block is not None:
            del block[symbol]

    def variable_items(self) -> Iterator[Tuple[str, Any]]:
        """Yield (name, value) pairs of every scope, outermost first."""
        for block in self._variables:
            yield from block.items()

    # Components.

    def add_component(self, name: str, content: Any) -> None:
        """Declare a component."""
        self._components[name] = content

    def remove_component(self, name: str) -> None:
        """Remove a component, if present."""
        self._components.pop(name, None)

    def has_component(self, symbol: str) -> bool:
        """Return True if the component exists."""
        return symbol in self._components

    def get_component(self, symbol: str) -> Any:
        """Return the component's value."""
        try:
            return self._components[symbol]
        except KeyError:
            raise NonExistentSymbolError(symbol) from None

    # Signals.

    def add_input(self, name: str, content: Any) -> None:
        """Declare an input signal."""
        self._inputs[name] = content

    def remove_input(self, name: str) -> None:
        """Remove an input signal, if present."""
        self._inputs.pop(name, None)

    def add_output(self, name: str, content: Any) -> None:
        """Declare an output signal."""
        self._outputs[name] = content

    def remove_output(self, name: str) -> None:
        """Remove an output signal, if present."""
        self._outputs.pop(name, None)

    def add_intermediate(self, name: str, content: Any) -> None:
        """Declare an intermediate signal."""
        self._intermediates[name] = content

    def remove_intermediate(self, name: str) -> None:
        """Remove an intermediate signal, if present."""
        self._intermediates.pop(name, None)

    def has_input(self, symbol: str) -> bool:
        """Return True if the input signal exists."""
        return symbol in self._inputs

    def has_output(self, symbol: str) -> bool:
        """Return True if the output signal exists."""
        return symbol in self._outputs

    def has_intermediate(self, symbol: str) -> bool:
        """Return True if the intermediate signal exists."""
        return symbol in self._intermediates

    def has_signal(self, symbol: str) -> bool:
        """Return True if the symbol is any kind of signal."""
        return (
            self.has_input(symbol)
            or self.has_output(symbol)
            or self.has_intermediate(symbol)
        )

    def get_input(self, symbol: str) -> Any:
        """Return the input signal's value."""
        try:
            return self._inputs[symbol]
        except KeyError:
            raise NonExistentSymbolError(symbol) from None

    def get_output(self, symbol: str) -> Any:
        """Return the output signal's value."""
        try:
            return self._outputs[symbol]
        except KeyError:
            raise NonExistentSymbolError(symbol) from None

    def get_intermediate(self, symbol: str) -> Any:
        """Return the intermediate signal's value."""
        try:
            return self._intermediates[symbol]
        except KeyError:
            raise NonExistentSymbolError(symbol) from None

    def get_signal(self, symbol: str) -> Any:
        """Return a signal's value, looking at inputs, outputs, then intermediates."""
        for table in (self._inputs, self._outputs, self._intermediates):
            if symbol in table:
                return table[symbol]
        raise NonExistentSymbolError(symbol)