"""
receiptlink — FastAPI application entry-point.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from receiptlink import __version__
from receiptlink.config import Settings, settings as default_settings
from receiptlink.store import ReceiptStore, build_store

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: ReceiptStore = app.state.store
    store.init_schema()
    logger.info("Receipt store ready: %s", type(store).__name__)
    yield
    logger.info("Shutting down")


async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.info("Unreadable request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Request body must be valid JSON."})


def create_app(
    store: Optional[ReceiptStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Assemble the app around one owned receipt store."""
    settings = settings or default_settings

    app = FastAPI(
        title="receiptlink",
        description="Payment-terminal receipt → stored record → shareable printable link",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, invalid_body_handler)

    @app.get("/")
    async def root():
        return {"service": "receiptlink", "version": __version__, "status": "running"}

    @app.get("/health")
    async def health_check():
        return {"ok": True}

    # ── Register routers ─────────────────────────────────────────────────
    from receiptlink.routers.receipts import router as receipts_router
    from receiptlink.routers.viewer import router as viewer_router

    app.include_router(receipts_router, prefix="/api", tags=["Receipts"])
    app.include_router(viewer_router, tags=["Viewer"])
    app.mount("/assets", StaticFiles(directory=STATIC_DIR), name="assets")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
