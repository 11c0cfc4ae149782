# quiet_highlighting/markdown/code_renderers.py
"""
Code block renderers.

The markdown pipeline turns every fenced code block into markup by calling
block_code(code, language) on the installed renderer. The installed renderer
is normally a QuietCodeRenderer wrapping a PygmentsCodeRenderer:

    QuietCodeRenderer(PygmentsCodeRenderer(css_class="highlight"))

The wrapper consults a HighlightState on each call and either delegates to the
highlighter or emits the code verbatim inside a bare <pre> element.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from .config import get_highlight_config
from .highlighting import default_state

logger = logging.getLogger(__name__)


class CodeBlockRenderer(ABC):
    """Turns one fenced code block into HTML."""

    @abstractmethod
    def block_code(self, code: str, language: Optional[str]) -> str:
        raise NotImplementedError


class PygmentsCodeRenderer(CodeBlockRenderer):
    """Syntax highlight code blocks with Pygments."""

    def __init__(
        self,
        css_class: str = "highlight",
        linenos: bool = False,
        guess_lang: bool = False,
    ):
        self.guess_lang = guess_lang
        self.formatter = HtmlFormatter(
            cssclass=css_class,
            linenos="table" if linenos else False,
        )

    def get_lexer(self, code: str, language: Optional[str]):
        if language:
            try:
                return get_lexer_by_name(language)
            except ClassNotFound:
                logger.debug(f"No lexer for language '{language}'")

        if self.guess_lang:
            try:
                return guess_lexer(code)
            except ClassNotFound:
                pass

        return TextLexer()

    def block_code(self, code: str, language: Optional[str]) -> str:
        return highlight(code, self.get_lexer(code, language), self.formatter)


class QuietCodeRenderer(CodeBlockRenderer):
    """
    Wrap a renderer so highlighting can be switched off with quiet().

    Args:
        default: Renderer used while highlighting is enabled
        state: HighlightState to consult (default: the process-wide state)
    """

    def __init__(self, default: CodeBlockRenderer, state=None):
        self.default = default
        self.state = default_state if state is None else state

    def block_code(self, code: str, language: Optional[str]) -> str:
        if self.state.enabled:
            return self.default.block_code(code, language)
        return f"<pre>{code}</pre>"


_code_renderer: Optional[CodeBlockRenderer] = None


def build_code_renderer(config=None, state=None) -> QuietCodeRenderer:
    """Build the standard renderer stack from highlight configuration."""
    config = get_highlight_config() if config is None else config
    return QuietCodeRenderer(PygmentsCodeRenderer(**config), state=state)


def get_code_renderer() -> CodeBlockRenderer:
    """Return the installed renderer, building it from settings on first use."""
    global _code_renderer
    if _code_renderer is None:
        _code_renderer = build_code_renderer()
    return _code_renderer


def set_code_renderer(renderer: Optional[CodeBlockRenderer]) -> None:
    """Install a renderer. Passing None rebuilds from settings on next use."""
    global _code_renderer
    _code_renderer = renderer
    if renderer is not None:
        logger.info(f"Installed code block renderer {type(renderer).__name__}")
