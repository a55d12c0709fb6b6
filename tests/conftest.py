"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake(브라우저 세션/페이지) 주입

금지:
- 실제 브라우저 실행
- 네트워크 호출
"""

from __future__ import annotations

import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Optional

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")


class FakePage:
    """Playwright Page 대역

    goto/wait_for_selector/wait_for_timeout 호출을 기록하고 content()로 고정 HTML을 돌려줍니다.
    """

    def __init__(
        self,
        html: str = "",
        url: Optional[str] = None,
        goto_error: Optional[Exception] = None,
        selector_error: Optional[Exception] = None,
    ):
        self.html = html
        self._final_url = url
        self.url = "about:blank"
        self.goto_error = goto_error
        self.selector_error = selector_error
        self.calls: list[tuple[str, Any, dict[str, Any]]] = []

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.calls.append(("goto", url, kwargs))
        if self.goto_error:
            raise self.goto_error
        self.url = self._final_url or url

    async def wait_for_selector(self, selector: str, **kwargs: Any) -> None:
        self.calls.append(("wait_for_selector", selector, kwargs))
        if self.selector_error:
            raise self.selector_error

    async def wait_for_timeout(self, timeout: float) -> None:
        self.calls.append(("wait_for_timeout", timeout, {}))

    async def content(self) -> str:
        return self.html

    def call_names(self) -> list[str]:
        return [name for name, _, _ in self.calls]


class FakeSession:
    """BrowserSession 대역 - 요청마다 다음 FakePage를 꺼내고 닫힘 횟수를 셉니다."""

    def __init__(self, *pages: FakePage):
        self.pages = list(pages)
        self.opened = 0
        self.closed = 0
        self.started = False
        self.shutdown_calls = 0

    @property
    def is_started(self) -> bool:
        return self.started

    async def ensure_started(self) -> None:
        self.started = True

    @asynccontextmanager
    async def isolated_page(self):
        self.started = True
        page = self.pages[self.opened] if self.opened < len(self.pages) else self.pages[-1]
        self.opened += 1
        try:
            yield page
        finally:
            self.closed += 1

    async def shutdown(self) -> None:
        self.shutdown_calls += 1
        self.started = False


class FakeClock:
    """CacheService 주입용 시계"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
