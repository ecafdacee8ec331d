from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, TypeAdapter

from template_lines.constants import Delimiter, TagKind


class ExpressionParts(BaseModel):
    """A variable interpolation split into the text around it and the variable name."""

    head: str = Field(default="", description="Literal text preceding the interpolation.")
    variable: str = Field(description="Name between the delimiters, whitespace preserved.")
    tail: str = Field(default="", description="Literal text following the interpolation.")
    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_source(self) -> str:
        """Reassemble the line the parts were taken from."""
        return f"{self.head}{Delimiter.VARIABLE_OPEN}{self.variable}{Delimiter.VARIABLE_CLOSE}{self.tail}"


class LiteralLine(BaseModel):
    kind: Literal["literal"] = "literal"
    text: str = Field(description="Line text, emitted verbatim.")
    model_config = ConfigDict(frozen=True, extra="forbid")


class InterpolationLine(BaseModel):
    kind: Literal["interpolation"] = "interpolation"
    parts: ExpressionParts
    model_config = ConfigDict(frozen=True, extra="forbid")


class TagLine(BaseModel):
    kind: Literal["tag"] = "tag"
    tag: TagKind = Field(description="Control-flow directive kind.")
    model_config = ConfigDict(frozen=True, extra="forbid")


class UnrecognizedLine(BaseModel):
    kind: Literal["unrecognized"] = "unrecognized"
    model_config = ConfigDict(frozen=True, extra="forbid")


LineCategory = Annotated[
    LiteralLine | InterpolationLine | TagLine | UnrecognizedLine,
    Discriminator("kind"),
]


def line_category_schema() -> dict[str, Any]:
    """Return the JSON Schema of a classified line."""
    return TypeAdapter(LineCategory).json_schema()
