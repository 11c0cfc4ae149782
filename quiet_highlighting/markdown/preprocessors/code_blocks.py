"""
Preprocessor that renders fenced code blocks before Pandoc sees them.

Converts:
    ```python
    print("hi")
    ```
into a Pandoc raw HTML block holding whatever the code block renderer returns:
    ````{=html}
    <div class="highlight"><pre>...</pre></div>
    ````

The raw block's fence is always longer than any backtick run in the markup,
so Pandoc passes the markup through untouched.

Fences nested in list items or blockquotes are found too. Their container
prefix ("  ", "> ", ">   ", ...) is stripped from the code handed to the
renderer and put back in front of every line of the raw block, so the block
stays inside its container.

Fence rules follow Pandoc/CommonMark:
- the closing fence uses the same character and is at least as long as the opening one
- a backtick fence's info string may not contain backticks
- a fence that is never closed is left untouched
"""

import re
from collections import namedtuple
from typing import Optional

from ..code_renderers import get_code_renderer

# Container prefix (blockquote markers and/or indentation), fence, info string
OPENING_FENCE_PATTERN = re.compile(
    r"(?P<prefix>(?:[ \t]*>[ \t]?)*[ \t]*)(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>.*)"
)

BACKTICK_RUN_PATTERN = re.compile(r"`+")

FencedBlock = namedtuple("FencedBlock", ["prefix", "language", "code", "end"])


def parse_language(info: str) -> Optional[str]:
    """
    Extract the language tag from a fence info string.

    Accepts both "python title=x" and Pandoc attribute syntax "{.python .numberLines}".
    """
    info = info.strip()
    if not info:
        return None

    if info.startswith("{"):
        for part in info.strip("{}").split():
            if part.startswith("."):
                return part[1:] or None
        return None

    return info.split()[0].lstrip(".") or None


def _line_ending(line: str) -> str:
    return line[len(line.rstrip("\r\n")):]


def strip_prefix(line: str, prefix: str) -> Optional[str]:
    """Remove a container prefix from a body line; None if the line leaves the container."""
    if line.startswith(prefix):
        return line[len(prefix):]
    # Blank lines may drop the prefix's trailing whitespace ("" in lists, ">" in quotes)
    if not line.strip() or line.rstrip() == prefix.rstrip():
        return _line_ending(line)
    return None


def match_fenced_block(lines, start) -> Optional[FencedBlock]:
    """Match a fenced code block opening at lines[start]."""
    opening = OPENING_FENCE_PATTERN.fullmatch(lines[start].rstrip("\r\n"))
    if not opening:
        return None

    fence, info = opening.group("fence"), opening.group("info")
    if fence[0] == "`" and "`" in info:
        return None

    prefix = opening.group("prefix")
    closing = re.compile(rf"[ \t]*{re.escape(fence)}{re.escape(fence[0])}*[ \t]*")

    body = []
    for index in range(start + 1, len(lines)):
        line = strip_prefix(lines[index], prefix)
        if line is None:
            return None
        if closing.fullmatch(line.rstrip("\r\n")):
            return FencedBlock(prefix, parse_language(info), "".join(body), index)
        body.append(line)

    return None


def raw_html_block(markup: str) -> str:
    longest = max((len(run) for run in BACKTICK_RUN_PATTERN.findall(markup)), default=0)
    fence = "`" * max(3, longest + 1)
    if not markup.endswith("\n"):
        markup += "\n"
    return f"{fence}{{=html}}\n{markup}{fence}"


def indent_block(block: str, prefix: str) -> str:
    if not prefix:
        return block
    return "\n".join(
        prefix + line if line else prefix.rstrip() for line in block.split("\n")
    )


def render_code_blocks(text: str, context: dict) -> str:
    """
    Replace every fenced code block with the renderer's markup.

    Args:
        text: Markdown text
        context: May contain 'code_renderer' to override the installed renderer

    Returns:
        Markdown with fenced code blocks replaced by raw HTML blocks
    """
    renderer = context.get("code_renderer") or get_code_renderer()

    lines = text.splitlines(keepends=True)
    output = []
    i = 0
    while i < len(lines):
        block = match_fenced_block(lines, i)
        if block is None:
            output.append(lines[i])
            i += 1
            continue

        markup = raw_html_block(renderer.block_code(block.code, block.language))
        output.append(indent_block(markup, block.prefix) + _line_ending(lines[block.end]))
        i = block.end + 1

    return "".join(output)
