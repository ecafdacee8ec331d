from enum import StrEnum


class Delimiter(StrEnum):
    """Markers that open and close template constructs."""

    TAG_OPEN = "{%"
    TAG_CLOSE = "%}"
    VARIABLE_OPEN = "{{"
    VARIABLE_CLOSE = "}}"


class Keyword(StrEnum):
    """Keywords recognized inside tag delimiters."""

    FOR = "for"
    IN = "in"
    ENDFOR = "endfor"
    IF = "if"
    ENDIF = "endif"


class TagKind(StrEnum):
    LOOP = "loop"
    CONDITIONAL = "conditional"


# A line belongs to a tag kind if it contains every keyword of at least one group.
# Order matters: earlier kinds win when a line matches several.
TAG_KEYWORDS: dict[TagKind, tuple[tuple[Keyword, ...], ...]] = {
    TagKind.LOOP: ((Keyword.FOR, Keyword.IN), (Keyword.ENDFOR,)),
    TagKind.CONDITIONAL: ((Keyword.IF,), (Keyword.ENDIF,)),
}
