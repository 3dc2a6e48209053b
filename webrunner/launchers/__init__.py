"""Launchers module - browser launcher families."""

from .factories import (
    PLAYWRIGHT_BROWSERS,
    PUPPETEER_BROWSERS,
    BrowserLauncher,
    LauncherFamily,
    chrome_launcher,
    playwright_launcher,
    puppeteer_launcher,
)

__all__ = [
    "PLAYWRIGHT_BROWSERS",
    "PUPPETEER_BROWSERS",
    "BrowserLauncher",
    "LauncherFamily",
    "chrome_launcher",
    "playwright_launcher",
    "puppeteer_launcher",
]
