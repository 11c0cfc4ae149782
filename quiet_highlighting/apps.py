from django.apps import AppConfig


class QuietHighlightingConfig(AppConfig):
    name = 'quiet_highlighting'

    def ready(self):
        """Install the code block renderer once settings are loaded."""
        from quiet_highlighting.markdown.code_renderers import (
            build_code_renderer,
            set_code_renderer,
        )

        set_code_renderer(build_code_renderer())
