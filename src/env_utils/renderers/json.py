"""JSON renderer for env-utils output."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from env_utils.renderers.base import BaseRenderer, OutputFormat, RenderContext


class JSONRenderer(BaseRenderer):
    """Renderer for JSON output format.

    Example:
        renderer = JSONRenderer()
        json_str = renderer.render(lookup_result, context)
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.JSON

    def render(self, data: Any, context: RenderContext) -> str:
        """Render data to a JSON string.

        Args:
            data: The data to render (a Pydantic model, or a list of them)
            context: Rendering context with options

        Returns:
            JSON string
        """
        return json.dumps(
            self._to_jsonable(data),
            indent=context.indent if context.indent else None,
            default=self._json_serializer,
            ensure_ascii=False,
        )

    @classmethod
    def _to_jsonable(cls, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json")
        if isinstance(data, (list, tuple)):
            return [cls._to_jsonable(item) for item in data]
        return data

    @staticmethod
    def _json_serializer(obj: Any) -> Any:
        """Custom JSON serializer for non-standard types."""
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, Path):
            return str(obj)
        if isinstance(obj, set):
            return sorted(obj)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
