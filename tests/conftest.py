import django
import pytest
from django.conf import settings

from quiet_highlighting.markdown.code_renderers import (
    CodeBlockRenderer,
    QuietCodeRenderer,
    set_code_renderer,
)
from quiet_highlighting.markdown.highlighting import default_state


def pytest_configure():
    settings.configure(
        INSTALLED_APPS=["quiet_highlighting"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [],
                "APP_DIRS": False,
            }
        ],
    )
    django.setup()


class RecordingRenderer(CodeBlockRenderer):
    """Stands in for the highlighting engine and remembers every call."""

    def __init__(self):
        self.calls = []

    def block_code(self, code, language):
        self.calls.append((code, language))
        return f'<highlighted lang="{language}">{code}</highlighted>'


@pytest.fixture(autouse=True)
def reset_highlighting():
    default_state.enabled = True
    yield
    default_state.enabled = True
    set_code_renderer(None)


@pytest.fixture
def engine():
    return RecordingRenderer()


@pytest.fixture
def installed_renderer(engine):
    renderer = QuietCodeRenderer(engine)
    set_code_renderer(renderer)
    return renderer


@pytest.fixture
def fake_pandoc(monkeypatch):
    """Replace Pandoc with an identity conversion and record its arguments."""
    calls = []

    def convert_text(text, to, format, extra_args=None, filters=None):
        calls.append({"to": to, "format": format, "extra_args": extra_args})
        return text

    monkeypatch.setattr("pypandoc.convert_text", convert_text)
    return calls
