import pytest

from progstruct.ssa_errors import SSAError, UndefinedVariableError


def test_undefined_variable_message():
    error = UndefinedVariableError("x", 3, (10, 12))
    assert str(error) == "The variable `x` is used before it is defined."


def test_undefined_variable_primary_message():
    error = UndefinedVariableError("y", None, None)
    assert error.primary_message == "The variable `y` is first seen here."


def test_undefined_variable_keeps_fields():
    error = UndefinedVariableError("z", 7, (1, 2))
    assert (error.name, error.file_id, error.location) == ("z", 7, (1, 2))


def test_undefined_variable_is_caught_as_ssa_error():
    error = UndefinedVariableError("w", 5, (4, 6))
    with pytest.raises(SSAError) as info:
        raise error
    caught = info.value
    assert caught is error
    assert (caught.name, caught.file_id, caught.location) == ("w", 5, (4, 6))
    assert str(caught) == "The variable `w` is used before it is defined."
    assert caught.primary_message == "The variable `w` is first seen here."


@pytest.mark.parametrize("name", ["a", "signal_in", "i_0"])
def test_undefined_variable_messages_name_the_variable(name):
    error = UndefinedVariableError(name, None, None)
    assert str(error) == f"The variable `{name}` is used before it is defined."
    assert error.primary_message == f"The variable `{name}` is first seen here."