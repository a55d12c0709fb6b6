"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from site_scraper.core.config import settings
from site_scraper.core.exceptions import ScraperException
from site_scraper.core.logging import logger
from site_scraper.api import health_router, scrape_router, get_orchestrator


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 (SIGTERM → uvicorn → shutdown 훅)"""
    logger.info("Starting application...")
    if not settings.api_key:
        logger.warning("API_KEY is not set: every protected endpoint will answer 401")
    if settings.scraper_browser_warmup:
        orchestrator = app.dependency_overrides.get(get_orchestrator, get_orchestrator)()
        await orchestrator.init()
    logger.info("Application started")
    yield
    logger.info("Shutting down application, closing scraper...")
    orchestrator = app.dependency_overrides.get(get_orchestrator, get_orchestrator)()
    try:
        await orchestrator.close()
    except Exception as e:
        # 종료 훅에서의 예외는 앱 종료를 막지 않도록 로그만 남김
        logger.error(f"Scraper close failed: {e}")


def _format_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(messages)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _format_validation_error(exc)
        logger.warning(f"[API] Input validation failed: {message}")
        return JSONResponse(status_code=400, content={"error": "Invalid request", "message": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(ScraperException)
    async def scraper_exception_handler(request: Request, exc: ScraperException):
        logger.error(f"[API] Unhandled scraper error: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error", "message": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"[API] Server error: {type(exc).__name__}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error", "message": str(exc)})


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(scrape_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("site_scraper.app:app", host=settings.host, port=settings.port)
