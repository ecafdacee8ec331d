import logging
from collections.abc import Mapping
from typing import assert_never

from template_lines.classifier import classify
from template_lines.exceptions import MalformedExpressionError, UnrecognizedLineError, UnsupportedLineError
from template_lines.models import ExpressionParts, InterpolationLine, LiteralLine, TagLine, UnrecognizedLine
from template_lines.settings import MalformedPolicy, Settings, UnrecognizedPolicy

logger = logging.getLogger(__name__)


def render(parts: ExpressionParts, bindings: Mapping[str, str]) -> str:
    """Substitute the bound value of the variable between head and tail.

    An unbound variable renders as empty text.
    """
    value = bindings.get(parts.variable)
    if value is None:
        logger.debug(f"Variable '{parts.variable}' is unbound, rendering as empty text")
        value = ""
    return f"{parts.head}{value}{parts.tail}"


def render_line(line: str, bindings: Mapping[str, str], settings: Settings | None = None) -> str:
    """Classify a single line and render it.

    Literal lines come back unchanged and interpolation lines are rendered with
    the given bindings. Unrecognized and malformed lines are handled according
    to the settings.

    Raises:
        UnsupportedLineError: If the line is a control-flow tag.
        UnrecognizedLineError: If the line is unrecognized and the policy is "error".
        MalformedExpressionError: If the line is malformed and the policy is "error".
    """
    settings = settings or Settings()

    try:
        category = classify(line)
    except MalformedExpressionError as e:
        if settings.malformed == MalformedPolicy.ERROR:
            raise
        logger.warning(f"Passing malformed line through as text: {e.message}")
        return line

    match category:
        case LiteralLine(text=text):
            return text
        case InterpolationLine(parts=parts):
            return render(parts, bindings)
        case TagLine(tag=tag):
            raise UnsupportedLineError(f"Cannot render {tag} tag line {line!r}; tags are executed by the caller")
        case UnrecognizedLine():
            if settings.unrecognized == UnrecognizedPolicy.ERROR:
                raise UnrecognizedLineError(f"Unrecognized template line {line!r}")
            logger.warning(f"Passing unrecognized line through as text: {line!r}")
            return line
        case _:
            assert_never(category)
