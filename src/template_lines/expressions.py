"""Substring helpers and interpolation decomposition."""

from template_lines.constants import Delimiter
from template_lines.exceptions import MalformedExpressionError
from template_lines.models import ExpressionParts


def contains_symbol(line: str, symbol: str) -> bool:
    """Check if a symbol occurs anywhere in a line."""
    return symbol in line


def contains_pair(line: str, left: str, right: str) -> bool:
    """Check if both markers of a delimiter pair occur in a line.

    Ordering and balance are not checked: "}} x {{" contains the pair "{{", "}}".
    """
    return contains_symbol(line, left) and contains_symbol(line, right)


def find_symbol(line: str, symbol: str) -> int | None:
    """Return the index of the first occurrence of a symbol, or None if absent."""
    index = line.find(symbol)
    if index < 0:
        return None
    return index


def decompose(line: str) -> ExpressionParts:
    """Split an interpolation line into head, variable name and tail.

    Only the first "{" and the first "}" of the line are considered, so lines with
    several interpolations or stray braces before the intended delimiter split at
    the wrong place.

    Raises:
        MalformedExpressionError: If the delimiter boundaries cannot be located.
    """
    open_index = find_symbol(line, Delimiter.VARIABLE_OPEN[0])
    if open_index is None:
        raise MalformedExpressionError(f"No opening delimiter found in {line!r}")

    close_index = find_symbol(line, Delimiter.VARIABLE_CLOSE[0])
    if close_index is None:
        raise MalformedExpressionError(f"No closing delimiter found in {line!r}")

    variable_start = open_index + len(Delimiter.VARIABLE_OPEN)
    if close_index < variable_start:
        raise MalformedExpressionError(
            f"Closing delimiter at position {close_index} precedes expression start at position {variable_start} in {line!r}"
        )

    tail_start = close_index + len(Delimiter.VARIABLE_CLOSE)
    if tail_start > len(line):
        raise MalformedExpressionError(f"Closing delimiter at position {close_index} is truncated in {line!r}")

    return ExpressionParts(
        head=line[:open_index],
        variable=line[variable_start:close_index],
        tail=line[tail_start:],
    )
