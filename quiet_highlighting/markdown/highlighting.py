# quiet_highlighting/markdown/highlighting.py
"""
Scoped suppression of syntax highlighting.

A HighlightState carries a single "enabled" flag. Code block renderers read it
on every call; quiet() and quietly() switch it off for the duration of a block
of work and switch it back on afterwards, however that work exits.

Usage:
    html = quiet(lambda: render_markdown(text))

    with quietly():
        html = render_markdown(text)

Notes:
- Scopes do not stack. Leaving an inner scope re-enables highlighting even if
  an outer scope is still running.
- There is no locking. Only one scope per state object may be active at a
  time; give each concurrent rendering session its own HighlightState.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class HighlightState:
    """Whether code blocks should currently be syntax highlighted."""

    enabled: bool = True


# Process-wide state used when no explicit state is passed
default_state = HighlightState()


def _resolve(state):
    return default_state if state is None else state


def highlighting_enabled(state=None) -> bool:
    return _resolve(state).enabled


def quiet(work, state=None):
    """
    Run work() with syntax highlighting suppressed.

    Args:
        work: Zero-argument callable
        state: HighlightState to toggle (default: the process-wide state)

    Returns:
        Whatever work() returns. Exceptions raised by work() propagate
        unchanged once highlighting has been re-enabled.
    """
    with quietly(state):
        return work()


@contextmanager
def quietly(state=None):
    """Context manager form of quiet(); yields the state being toggled."""
    state = _resolve(state)
    state.enabled = False
    logger.debug("Syntax highlighting suppressed")
    try:
        yield state
    finally:
        state.enabled = True
        logger.debug("Syntax highlighting restored")
