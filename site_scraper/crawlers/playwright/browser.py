"""Playwright 공용 브라우저 세션 관리.

브라우저 프로세스는 하나만 띄워 모든 요청이 공유하고,
요청마다 격리된 BrowserContext(쿠키/DOM/네비게이션 분리)를 새로 만들어 씁니다.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import async_playwright, Browser, Page, Playwright

from site_scraper.core.logging import logger
from site_scraper.core.exceptions import BrowserException

from .pages import build_context_options, configure_page


LAUNCH_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-blink-features=AutomationControlled",
)


def build_launch_args() -> list[str]:
    return list(LAUNCH_ARGS)


class BrowserSession:
    """공유 브라우저 프로세스의 수명 관리

    - ensure_started(): 실행 중이 아니면 시작 (idempotent)
    - isolated_page(): 요청 하나 전용 context+page, 블록을 벗어나면 항상 닫힘
    - shutdown(): 브라우저 종료, 시작한 적 없으면 no-op
    """

    def __init__(self, headless: bool = True):
        self.headless = headless
        self._lock = asyncio.Lock()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    @property
    def is_started(self) -> bool:
        return self._browser is not None

    async def ensure_started(self) -> Browser:
        async with self._lock:
            if self._browser is not None:
                if self._browser.is_connected():
                    return self._browser
                logger.warning("[Playwright] Shared browser disconnected, relaunching")
                await self._close_unlocked()

            logger.info("[Playwright] Launching browser...")
            pw = await async_playwright().start()
            try:
                browser = await pw.chromium.launch(
                    headless=self.headless,
                    args=build_launch_args(),
                )
            except Exception as e:
                logger.error(f"[Playwright] Failed to launch browser: {type(e).__name__}: {e}")
                try:
                    await pw.stop()
                except Exception as stop_err:
                    logger.debug(f"[Playwright] Stop after failed launch raised: {stop_err}")
                raise BrowserException(f"Browser launch failed: {e}") from e

            self._playwright = pw
            self._browser = browser
            logger.info("[Playwright] Browser launched successfully (shared)")
            return browser

    @asynccontextmanager
    async def isolated_page(self) -> AsyncIterator[Page]:
        """요청 전용 page. 예외가 나도 context는 닫힌 뒤 전파됩니다."""
        browser = await self.ensure_started()
        context = await browser.new_context(**build_context_options())
        try:
            page = await context.new_page()
            await configure_page(page)
            yield page
        finally:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"[Playwright] Failed to close page context: {type(e).__name__}: {e}")

    async def shutdown(self) -> None:
        async with self._lock:
            await self._close_unlocked()

    async def _close_unlocked(self) -> None:
        browser, pw = self._browser, self._playwright
        self._browser = None
        self._playwright = None

        if browser is not None:
            try:
                await browser.close()
            except Exception as e:
                logger.warning(f"[Playwright] Browser close failed: {type(e).__name__}: {e}")
        if pw is not None:
            try:
                await pw.stop()
            except Exception as e:
                logger.warning(f"[Playwright] Playwright stop failed: {type(e).__name__}: {e}")
        if browser is not None:
            logger.info("[Playwright] Browser closed")
