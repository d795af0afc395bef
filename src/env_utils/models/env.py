"""Environment variable definition and reference data models."""

from __future__ import annotations

import os
import re
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from env_utils.models.common import ErrorRecord

NAME_PATTERN = re.compile(r"[A-Z_][A-Z0-9_]*")


class Location(BaseModel):
    """Where a definition lives: a file and the start of one of its lines."""

    model_config = {"frozen": True}

    path: str = Field(description="Path of the definition file")
    line: int = Field(ge=0, description="Zero-based line number")
    character: int = Field(default=0, ge=0, description="Column of the line start")
    offset: int = Field(default=0, ge=0, description="Character offset of the line start")

    @property
    def directory(self) -> str:
        """Directory containing the file."""
        return os.path.dirname(self.path)

    def __str__(self) -> str:
        return f"{self.path}:{self.line + 1}"


class EnvVarDefinition(BaseModel):
    """One ``NAME=VALUE`` line found in a definition file."""

    model_config = {"frozen": True}

    name: str = Field(description="Variable name")
    value: str = Field(description="Raw right-hand side, whitespace trimmed")
    location: Location = Field(description="Where the definition was found")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not NAME_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid environment variable name: {value!r}")
        return value


class ProjectRoot(BaseModel):
    """A top-level project directory to scan."""

    model_config = {"frozen": True}

    path: str = Field(description="Root directory")
    name: str = Field(default="", description="Name matched against the exclusion set")

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name") and data.get("path"):
            data = {**data, "name": os.path.basename(os.path.normpath(str(data["path"])))}
        return data


class Reference(BaseModel):
    """An occurrence of ``$NAME``, ``${NAME}``, ``'NAME'`` or ``"NAME"`` in text."""

    model_config = {"frozen": True}

    start: int = Field(ge=0, description="Start offset (inclusive)")
    end: int = Field(ge=0, description="End offset (exclusive)")
    text: str = Field(description="Matched text including the syntax wrapper")
    name: str = Field(description="Canonical variable name")


class ScanError(BaseModel):
    """A file that was skipped during a scan."""

    model_config = {"frozen": True}

    path: str = Field(description="File that could not be read")
    message: str = Field(description="Why it was skipped")


class ScanResult(BaseModel):
    """Summary of one index rebuild."""

    model_config = {"frozen": True}

    definitions_found: int = Field(default=0, description="Definitions indexed")
    names_found: int = Field(default=0, description="Distinct variable names")
    files_scanned: int = Field(default=0, description="Definition files read")
    files_skipped: int = Field(default=0, description="Files that could not be read")
    roots_scanned: list[str] = Field(default_factory=list, description="Roots walked")
    roots_excluded: list[str] = Field(default_factory=list, description="Roots excluded by name")
    errors: list[ScanError] = Field(default_factory=list, description="Skipped files")
    duration_ms: float = Field(default=0.0, description="Wall time of the scan")

    @property
    def success(self) -> bool:
        """True when every candidate file was read."""
        return not self.errors

    def error_records(self) -> list[ErrorRecord]:
        return [
            ErrorRecord(code="FILE_ACCESS_ERROR", message=e.message, details={"path": e.path})
            for e in self.errors
        ]


class Annotation(BaseModel):
    """An inline value shown next to a reference."""

    model_config = {"frozen": True}

    reference: Reference = Field(description="The annotated reference")
    definition: EnvVarDefinition = Field(description="Definition whose value is shown")
    display_value: str = Field(description="Value with surrounding quotes stripped")
    line: int = Field(default=0, ge=0, description="Zero-based line of the reference")


class Hover(BaseModel):
    """Hover content for a reference."""

    model_config = {"frozen": True}

    reference: Reference = Field(description="The hovered reference")
    definition: EnvVarDefinition = Field(description="Best matching definition")
    markdown: str = Field(description="Rendered hover text")
