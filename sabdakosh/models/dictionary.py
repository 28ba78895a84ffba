"""Dictionary data models."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Definition(BaseModel):
    """One sense-group under a head-word."""

    model_config = ConfigDict(frozen=True)

    grammar: str = Field(default="", description="Short grammatical tag")
    etymology: str = Field(default="", description="Word origin")
    senses: Tuple[str, ...] = Field(
        default=(), description="Meanings in presentation order"
    )


class DictionaryEntry(BaseModel):
    """A head-word and its definitions."""

    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, description="Canonical head-word")
    definitions: Tuple[Definition, ...] = Field(
        default=(), description="Definitions in presentation order"
    )
