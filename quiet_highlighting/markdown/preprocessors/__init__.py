# quiet_highlighting/markdown/preprocessors/__init__.py

from .code_blocks import render_code_blocks

PREPROCESSORS = [
    render_code_blocks,  # Fenced code must be rendered before Pandoc parses the text
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
