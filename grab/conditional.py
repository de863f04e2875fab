from typing import TypeVar

T = TypeVar("T")


def if_(condition: bool, if_true: T, if_false: T) -> T:
    """Get if_true when condition holds, otherwise if_false.

    Both values are evaluated by the caller before the call, unlike a conditional
    expression. Handy as an argument to higher order functions.

    Example:
        >>> if_(foo == "bar", "foo is bar", "foo is not bar")
    """
    if condition:
        return if_true
    return if_false
