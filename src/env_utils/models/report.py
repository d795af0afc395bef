"""Report models produced by the command line interface."""

from __future__ import annotations

from pydantic import BaseModel, Field

from env_utils.models.env import Annotation, EnvVarDefinition, Hover, Location, ScanResult


class IndexEntry(BaseModel):
    """One variable name in the index summary."""

    model_config = {"frozen": True}

    name: str = Field(description="Variable name")
    count: int = Field(description="Number of definitions")
    first_value: str = Field(description="Value of the first definition in index order")


class IndexReport(BaseModel):
    """Index contents after a rebuild."""

    model_config = {"frozen": True}

    scan: ScanResult = Field(description="Scan summary")
    entries: list[IndexEntry] = Field(default_factory=list, description="Indexed names")


class LookupResult(BaseModel):
    """Definitions of one name, most relevant first."""

    model_config = {"frozen": True}

    name: str = Field(description="Variable name looked up")
    origin: str | None = Field(default=None, description="Origin file used for ordering")
    definitions: list[EnvVarDefinition] = Field(default_factory=list, description="Ordered definitions")


class NavigationResult(BaseModel):
    """Result of a go-to-definition or find-references query."""

    model_config = {"frozen": True}

    name: str | None = Field(default=None, description="Reference under the cursor")
    locations: list[Location] = Field(default_factory=list, description="Target locations")


class HoverResult(BaseModel):
    """Hover query result."""

    model_config = {"frozen": True}

    hover: Hover | None = Field(default=None, description="Hover content, if any")


class AnnotationReport(BaseModel):
    """Inline values for one file."""

    model_config = {"frozen": True}

    path: str = Field(description="Annotated file")
    annotations: list[Annotation] = Field(default_factory=list, description="Resolved references")
    unresolved: list[str] = Field(default_factory=list, description="Referenced names with no definition")
