"""Selection of the active browser launchers."""

import logging
from typing import Any, Optional

from ..errors import ConflictingLauncherError, InvalidLauncherSelectionError
from ..launchers import BrowserLauncher, chrome_launcher, playwright_launcher, puppeteer_launcher
from .schema import RunConfig

logger = logging.getLogger(__name__)


def negotiate_launchers(
    config: RunConfig, cli_args: Optional[dict[str, Any]] = None
) -> list[BrowserLauncher]:
    """Set ``config.browsers`` from the launcher flags and browser names.

    The --puppeteer and --playwright flags pick a launcher family and
    --browsers narrows the browsers within it. Browsers configured by hand
    bypass both flags, so combining them is an error.

    Args:
        config: Root config; its browsers are replaced.
        cli_args: Parsed CLI args.

    Returns:
        The active launchers.

    Raises:
        ConflictingLauncherError: If a family flag is set and browsers are
            also configured.
        InvalidLauncherSelectionError: If browser names are given without a
            family flag, or a name is unknown to the family.
    """
    cli_args = cli_args or {}
    browser_names = cli_args.get("browsers")

    if cli_args.get("puppeteer"):
        _check_no_manual_browsers(config, "--puppeteer")
        config.browsers = puppeteer_launcher(browser_names)
    elif cli_args.get("playwright"):
        _check_no_manual_browsers(config, "--playwright")
        config.browsers = playwright_launcher(browser_names)
    else:
        if browser_names is not None:
            raise InvalidLauncherSelectionError(
                "The browsers option must be used along with the puppeteer or playwright option."
            )
        if config.browsers is None:
            config.browsers = [chrome_launcher()]

    logger.debug("Active launchers: %s", ", ".join(str(b) for b in config.browsers))
    return config.browsers


def _check_no_manual_browsers(config: RunConfig, flag: str) -> None:
    if config.browsers:
        raise ConflictingLauncherError(
            f"The {flag} flag cannot be used when defining browsers manually in your config."
        )
