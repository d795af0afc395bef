"""Output format renderers."""

from env_utils.renderers.base import BaseRenderer, OutputFormat, RenderContext, Renderer
from env_utils.renderers.json import JSONRenderer
from env_utils.renderers.terminal import TerminalRenderer

__all__ = [
    "BaseRenderer",
    "OutputFormat",
    "RenderContext",
    "Renderer",
    "JSONRenderer",
    "TerminalRenderer",
    "get_renderer",
]


def get_renderer(format: OutputFormat | str) -> BaseRenderer:
    """Get a renderer for the specified format.

    Args:
        format: Output format (OutputFormat enum or string)

    Returns:
        Appropriate renderer instance

    Raises:
        ValueError: If format is not supported
    """
    if isinstance(format, str):
        format = OutputFormat(format)

    renderers = {
        OutputFormat.JSON: JSONRenderer,
        OutputFormat.TERMINAL: TerminalRenderer,
    }

    renderer_class = renderers.get(format)
    if renderer_class is None:
        raise ValueError(f"Unsupported format: {format}")

    return renderer_class()
