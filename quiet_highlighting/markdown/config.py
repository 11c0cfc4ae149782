from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_HIGHLIGHT_CONFIG = {
    "css_class": "highlight",
    "linenos": False,
    "guess_lang": False,
}


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Fenced code blocks never reach Pandoc as code: the code_blocks preprocessor
    renders them first and hands Pandoc raw HTML blocks (raw_attribute). Pandoc's
    own highlighter stays off; only indented (unfenced) code blocks reach it.
    """
    extra_args = [
        # Enable Pandoc markdown extensions (all in --from argument)
        "--from=markdown+fenced_code_blocks+fenced_code_attributes+raw_html+raw_attribute+pipe_tables+footnotes+smart",
        # Code highlighting is done by the code block renderer
        "--no-highlight",
    ]
    extra_args.extend(getattr(settings, "MARKDOWN_PANDOC_EXTRA_ARGS", []))

    return {
        "extra_args": extra_args,
        # Pandoc filters can be added here (Python or Lua filters)
        "filters": [],
    }


def get_highlight_config():
    """
    Options for the default (Pygments) code block renderer.

    Reads settings.MARKDOWN_HIGHLIGHT and merges it over DEFAULT_HIGHLIGHT_CONFIG.
    """
    overrides = getattr(settings, "MARKDOWN_HIGHLIGHT", None) or {}

    unknown = set(overrides) - set(DEFAULT_HIGHLIGHT_CONFIG)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown MARKDOWN_HIGHLIGHT option(s): {', '.join(sorted(unknown))}"
        )

    return {**DEFAULT_HIGHLIGHT_CONFIG, **overrides}
