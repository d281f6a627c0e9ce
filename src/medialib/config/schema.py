"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field

from medialib.catalog.models import Language

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LibraryConfig(BaseModel):
    """Library configuration."""

    name: str = "unnamed"
    email_id: str | None = None  # Owner contact
    log_level: LogLevel = "INFO"
    default_language: Language = Field(default=Language.ENGLISH)
