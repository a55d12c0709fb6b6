"""Playwright context/page 설정.

요청마다 새로 만드는 BrowserContext 옵션(뷰포트, User-Agent)과
Page 생성 후 공통 설정을 분리합니다. 값은 설정으로 바꿀 수 없는 고정값입니다.
"""

from __future__ import annotations

from typing import Any

from playwright.async_api import Page


DEFAULT_VIEWPORT = {"width": 1920, "height": 1080}
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# 개별 단계(goto/wait_for_selector)는 각자 timeout을 넘기므로 이 값은 상한 역할만 합니다.
DEFAULT_PAGE_TIMEOUT_MS = 30000


def build_context_options() -> dict[str, Any]:
    return {
        "viewport": dict(DEFAULT_VIEWPORT),
        "user_agent": USER_AGENT,
        "extra_http_headers": {
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        },
    }


async def configure_page(page: Page) -> Page:
    page.set_default_timeout(DEFAULT_PAGE_TIMEOUT_MS)
    page.set_default_navigation_timeout(DEFAULT_PAGE_TIMEOUT_MS)
    return page
