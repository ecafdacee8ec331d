from .classifier import classify, is_interpolation_line, is_tag_line, match_tag_kind
from .constants import Delimiter, Keyword, TagKind
from .exceptions import MalformedExpressionError, TemplatesError, UnrecognizedLineError, UnsupportedLineError
from .expressions import contains_pair, contains_symbol, decompose, find_symbol
from .models import ExpressionParts, InterpolationLine, LineCategory, LiteralLine, TagLine, UnrecognizedLine, line_category_schema
from .renderer import render, render_line
from .settings import MalformedPolicy, Settings, UnrecognizedPolicy

__all__ = [
    "classify",
    "decompose",
    "render",
    "render_line",
    "is_tag_line",
    "is_interpolation_line",
    "match_tag_kind",
    "contains_symbol",
    "contains_pair",
    "find_symbol",
    "ExpressionParts",
    "LineCategory",
    "line_category_schema",
    "LiteralLine",
    "InterpolationLine",
    "TagLine",
    "UnrecognizedLine",
    "Delimiter",
    "Keyword",
    "TagKind",
    "Settings",
    "UnrecognizedPolicy",
    "MalformedPolicy",
    "TemplatesError",
    "MalformedExpressionError",
    "UnrecognizedLineError",
    "UnsupportedLineError",
]
