"""설정 관리 - 환경 변수 로드 및 검증"""
import logging

from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정

    NOTE: 캐시 TTL, 네비게이션 타임아웃, 뷰포트/User-Agent 같은 스크래퍼 동작 상수는
    계약(contract)으로 고정되어 있으므로 여기서 바꾸지 않습니다.
    (engine/orchestrator.py, crawlers/playwright/pages.py 참고)
    """

    # 인증 (x-api-key 헤더). 비어 있으면 보호된 엔드포인트는 모두 거절됩니다.
    api_key: str = ""

    # 서버
    host: str = "0.0.0.0"
    port: int = 3000

    # 앱 시작 시 브라우저를 미리 띄울지 여부
    # 기본값은 False: 첫 요청에서 lazy-launch
    scraper_browser_warmup: bool = False

    # API
    api_title: str = "Multi-Site E-Commerce Scraper API"
    api_version: str = "2.0.0"
    api_description: str = "Site configuration driven product search and detail extraction."

    # 로깅 (ENVIRONMENT=production이면 DEBUG를 INFO로 올리고 간단한 포맷 사용)
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log_level: {v}")
        return level

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
