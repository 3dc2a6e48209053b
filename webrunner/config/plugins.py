"""Assembly of the ordered dev server plugin pipeline."""

from ..plugins import (
    Plugin,
    emulate_media_plugin,
    esbuild_plugin,
    node_resolve_plugin,
    set_user_agent_plugin,
    set_viewport_plugin,
    syntax_checker_plugin,
)
from .schema import RunConfig


def assemble_plugins(config: RunConfig) -> list[Plugin]:
    """Build the plugin pipeline for a resolved config.

    Order, front to back:
        esbuild (when esbuild_target is set), the three test session
        command plugins, the syntax checker, the user's plugins, and
        node-resolve (when node_resolve is set).

    esbuild goes first so it sees untouched source. node-resolve goes
    last so user plugins can resolve imports before it.

    Args:
        config: Config with root_dir already resolved.

    Returns:
        A new list; config.plugins is left as it is.
    """
    plugins: list[Plugin] = []

    if config.esbuild_target:
        plugins.append(esbuild_plugin(config.esbuild_target))

    plugins.extend([set_viewport_plugin(), emulate_media_plugin(), set_user_agent_plugin()])
    plugins.append(syntax_checker_plugin())
    plugins.extend(config.plugins or [])

    if config.node_resolve is True or isinstance(config.node_resolve, dict):
        options = config.node_resolve if isinstance(config.node_resolve, dict) else None
        plugins.append(node_resolve_plugin(config.root_dir, config.preserve_symlinks, options))

    return plugins
