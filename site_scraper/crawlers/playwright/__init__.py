"""Playwright module for the site scraper."""

from .browser import BrowserSession, build_launch_args
from .pages import DEFAULT_VIEWPORT, USER_AGENT, build_context_options, configure_page

__all__ = [
    "BrowserSession",
    "build_launch_args",
    "DEFAULT_VIEWPORT",
    "USER_AGENT",
    "build_context_options",
    "configure_page",
]
