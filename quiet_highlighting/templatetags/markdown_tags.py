# quiet_highlighting/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from quiet_highlighting.markdown.highlighting import quiet
from quiet_highlighting.markdown.renderer import render_markdown, render_markdown_quietly

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="markdown_plain")
def markdown_plain_filter(value):
    """Render markdown without syntax highlighting in code blocks"""
    return mark_safe(render_markdown_quietly(value))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value, highlight=True):
    """Template tag that passes template context to processors"""
    processor_context = {
        "user": context.get("user"),
        "request": context.get("request"),
        "highlight": _as_bool(highlight),
    }
    return mark_safe(render_markdown(value, context=processor_context))


def _as_bool(value):
    """Template arguments may arrive as strings: highlight="false" means False"""
    if isinstance(value, str):
        return value.strip().lower() not in ("", "false", "0", "no", "off")
    return bool(value)


class NoHighlightNode(template.Node):
    def __init__(self, nodelist):
        self.nodelist = nodelist

    def render(self, context):
        return quiet(lambda: self.nodelist.render(context))


@register.tag("nohighlight")
def do_nohighlight(parser, token):
    """
    Usage:
    {% nohighlight %}
        {{ post.body|markdown }}
    {% endnohighlight %}
    """
    bits = token.split_contents()
    if len(bits) != 1:
        raise template.TemplateSyntaxError(f"'{bits[0]}' takes no arguments")

    nodelist = parser.parse(("endnohighlight",))
    parser.delete_first_token()

    return NoHighlightNode(nodelist)
