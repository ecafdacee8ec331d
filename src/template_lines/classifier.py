"""Line classification.

A line is classified by substring checks alone. Tag lines are tested before
interpolation lines, so a line carrying both delimiter pairs and a tag keyword
is a tag.
"""

from template_lines.constants import TAG_KEYWORDS, Delimiter, TagKind
from template_lines.expressions import contains_pair, contains_symbol, decompose
from template_lines.models import InterpolationLine, LineCategory, LiteralLine, TagLine, UnrecognizedLine


def is_tag_line(line: str) -> bool:
    return contains_pair(line, Delimiter.TAG_OPEN, Delimiter.TAG_CLOSE)


def is_interpolation_line(line: str) -> bool:
    return contains_pair(line, Delimiter.VARIABLE_OPEN, Delimiter.VARIABLE_CLOSE)


def match_tag_kind(line: str) -> TagKind | None:
    """Return the first tag kind whose keywords occur in the line.

    Keywords are matched as plain substrings, so "information" satisfies both
    "for" and "in".
    """
    for kind, groups in TAG_KEYWORDS.items():
        if any(all(contains_symbol(line, keyword) for keyword in group) for group in groups):
            return kind
    return None


def classify(line: str) -> LineCategory:
    """Classify a single template line.

    Raises:
        MalformedExpressionError: If the line looks like an interpolation but
            its delimiters cannot be decomposed.
    """
    has_tag = is_tag_line(line)
    has_interpolation = is_interpolation_line(line)

    match has_tag, match_tag_kind(line), has_interpolation:
        case True, TagKind() as kind, _:
            return TagLine(tag=kind)
        case _, _, True:
            return InterpolationLine(parts=decompose(line))
        case False, _, False:
            return LiteralLine(text=line)
        case _:
            return UnrecognizedLine()
