from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UnrecognizedPolicy(StrEnum):
    """What render_line does with a line that has delimiters but no known category."""

    PASSTHROUGH = "passthrough"
    ERROR = "error"


class MalformedPolicy(StrEnum):
    """What render_line does with an interpolation line that cannot be decomposed."""

    ERROR = "error"
    PASSTHROUGH = "passthrough"


class Settings(BaseSettings):
    unrecognized: UnrecognizedPolicy = Field(default=UnrecognizedPolicy.PASSTHROUGH)
    malformed: MalformedPolicy = Field(default=MalformedPolicy.ERROR)

    model_config = SettingsConfigDict(env_prefix="TEMPLATE_LINES_")
