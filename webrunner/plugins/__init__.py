"""Plugins module - dev server and test session plugins."""

from .base import Plugin
from .commands import emulate_media_plugin, set_user_agent_plugin, set_viewport_plugin
from .dev_server import esbuild_plugin, node_resolve_plugin, syntax_checker_plugin

__all__ = [
    "Plugin",
    "emulate_media_plugin",
    "esbuild_plugin",
    "node_resolve_plugin",
    "set_user_agent_plugin",
    "set_viewport_plugin",
    "syntax_checker_plugin",
]
