"""Plugins handling commands sent from the browser during a test session.

Each plugin answers one command a test can issue to change the page it
runs in.
"""

from .base import Plugin


def set_viewport_plugin() -> Plugin:
    """Plugin for the ``set-viewport`` command (resize the page)."""
    return Plugin(name="set-viewport-command", options={"command": "set-viewport"})


def emulate_media_plugin() -> Plugin:
    """Plugin for the ``emulate-media`` command (media type, color scheme)."""
    return Plugin(name="emulate-media-command", options={"command": "emulate-media"})


def set_user_agent_plugin() -> Plugin:
    """Plugin for the ``set-user-agent`` command."""
    return Plugin(name="set-user-agent-command", options={"command": "set-user-agent"})
