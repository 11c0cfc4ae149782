"""Tests for the markdown template tags."""

import pytest
from django.template import Context, Template, TemplateSyntaxError

from quiet_highlighting.markdown.highlighting import highlighting_enabled

BODY = "```ruby\nputs 1\n```\n"
HIGHLIGHTED = '<highlighted lang="ruby">puts 1\n</highlighted>'
PLAIN = "<pre>puts 1\n</pre>"


def render(source, **context):
    return Template("{% load markdown_tags %}" + source).render(Context(context))


def test_markdown_filter(installed_renderer, fake_pandoc):
    html = render("{{ body|markdown }}", body=BODY)

    assert HIGHLIGHTED in html


def test_markdown_plain_filter(installed_renderer, fake_pandoc):
    html = render("{{ body|markdown_plain }}", body=BODY)

    assert PLAIN in html
    assert HIGHLIGHTED not in html


def test_nohighlight_block(installed_renderer, fake_pandoc):
    html = render(
        "{% nohighlight %}{{ body|markdown }}{% endnohighlight %}|{{ body|markdown }}",
        body=BODY,
    )

    quiet_part, normal_part = html.split("|")
    assert PLAIN in quiet_part
    assert HIGHLIGHTED in normal_part
    assert highlighting_enabled() is True


def test_nohighlight_rejects_arguments():
    with pytest.raises(TemplateSyntaxError):
        Template("{% load markdown_tags %}{% nohighlight now %}{% endnohighlight %}")


def test_markdown_with_context(installed_renderer, fake_pandoc):
    html = render(
        "{% markdown_with_context body highlight=False %}",
        body=BODY,
    )

    assert PLAIN in html


@pytest.mark.parametrize("flag", ['"False"', '"false"', '"0"', "0"])
def test_markdown_with_context_string_flags(installed_renderer, fake_pandoc, flag):
    html = render("{% markdown_with_context body highlight=" + flag + " %}", body=BODY)

    assert PLAIN in html
    assert HIGHLIGHTED not in html


def test_markdown_with_context_highlights_by_default(installed_renderer, fake_pandoc):
    html = render("{% markdown_with_context body %}", body=BODY)

    assert HIGHLIGHTED in html
