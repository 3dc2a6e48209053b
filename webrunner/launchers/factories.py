"""Browser launcher factories.

A launcher family is the automation backend used to drive browsers:
the built-in Chrome launcher, puppeteer or playwright. Only one family is
active per run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..errors import InvalidLauncherSelectionError


class LauncherFamily(str, Enum):
    """Supported launcher families."""
    CHROME = "chrome"
    PUPPETEER = "puppeteer"
    PLAYWRIGHT = "playwright"


PUPPETEER_BROWSERS = ("chrome", "firefox")
PLAYWRIGHT_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass
class BrowserLauncher:
    """Handle for launching one browser through one launcher family."""
    family: str
    browser: str
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return f"{self.family}:{self.browser}"

    def __str__(self) -> str:
        return self.name


def chrome_launcher(launch_options: Optional[dict[str, Any]] = None) -> BrowserLauncher:
    """Create the default launcher, driving a locally installed Chrome."""
    return BrowserLauncher(
        family=LauncherFamily.CHROME.value,
        browser="chrome",
        options=dict(launch_options or {}),
    )


def puppeteer_launcher(browsers: Optional[list[str]] = None) -> list[BrowserLauncher]:
    """Create puppeteer launchers for the given browser names.

    Args:
        browsers: Browser names, defaults to ["chrome"].

    Returns:
        One launcher per browser name.

    Raises:
        InvalidLauncherSelectionError: If a name is not supported by puppeteer.
    """
    return _family_launchers(LauncherFamily.PUPPETEER, browsers or ["chrome"], PUPPETEER_BROWSERS)


def playwright_launcher(browsers: Optional[list[str]] = None) -> list[BrowserLauncher]:
    """Create playwright launchers for the given browser names.

    Args:
        browsers: Browser names, defaults to ["chromium"].

    Returns:
        One launcher per browser name.

    Raises:
        InvalidLauncherSelectionError: If a name is not supported by playwright.
    """
    return _family_launchers(
        LauncherFamily.PLAYWRIGHT, browsers or ["chromium"], PLAYWRIGHT_BROWSERS
    )


def _family_launchers(
    family: LauncherFamily, browsers: list[str], valid: tuple[str, ...]
) -> list[BrowserLauncher]:
    launchers = []
    for browser in browsers:
        if browser not in valid:
            raise InvalidLauncherSelectionError(
                f"Unknown {family.value} browser '{browser}'. "
                f"Must be one of: {', '.join(valid)}"
            )
        launchers.append(BrowserLauncher(family=family.value, browser=browser))
    return launchers
