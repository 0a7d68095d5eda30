from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, field_validator


class ArrayConfig(BaseModel):
    """Library-wide defaults shared by every `JSArray`."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)

    index_base: Literal[0, 1] = 1
    separator: str = ","
    indent: str = "\t"

    @field_validator("index_base", mode="before")
    @classmethod
    def parse_index_base(cls, v: object) -> object:
        # environment variables arrive as text
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v

    @field_validator("indent")
    @classmethod
    def check_indent_is_whitespace(cls, v: str) -> str:
        if v.strip():
            raise ValueError(f"indent must only contain whitespace, got {v!r}")
        return v


current_config = ArrayConfig()


def set_config(config: ArrayConfig) -> None:
    global current_config
    current_config = config


def config() -> ArrayConfig:
    return current_config
