# quiet_highlighting/markdown/renderer.py

import pypandoc

from .code_renderers import get_code_renderer
from .config import get_pandoc_config
from .highlighting import quiet
from .preprocessors import apply_preprocessors


def render_markdown(text, context=None):
    """
    Main rendering function with pre-processing pipeline using pypandoc

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data.
            'code_renderer' overrides the installed code block renderer,
            'highlight': False renders without syntax highlighting.
    """
    context = context or {}

    if context.get("highlight", True) is False:
        renderer = context.get("code_renderer") or get_code_renderer()
        inner_context = {**context, "highlight": True}
        return quiet(
            lambda: render_markdown(text, inner_context),
            state=getattr(renderer, "state", None),
        )

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text, context)

    # Markdown conversion using pypandoc
    pandoc_config = get_pandoc_config()

    html = pypandoc.convert_text(
        text,
        to="html5",
        format="markdown",
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config.get("filters", []),
    )

    return html


def render_markdown_quietly(text, context=None):
    """Render markdown with every code block left unhighlighted"""
    return render_markdown(text, {**(context or {}), "highlight": False})
