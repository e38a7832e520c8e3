"""Text-to-text link transformation."""

from ..config.ReflinkConfig import ReflinkConfig
from ..markdown.parse_markdown import parse_markdown
from ..markdown.render_markdown import render_markdown
from .transform import transform
from .TransformStats import TransformStats


def transform_text(text: str, config: ReflinkConfig | None = None) -> tuple[str, TransformStats]:
    """Parse ``text``, transform it and render it back to Markdown."""
    tree, stats = transform(parse_markdown(text), config)
    return render_markdown(tree), stats
