import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from categories import router as categories_router
from core import db
from core.errors import register_exception_handlers
from core.logging import configure_logging
from recipes import router as recipes_router

logger = logging.getLogger(__name__)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*").strip() or "*"
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One store client per process; routes reach it through `db.get_db`.
    configure_logging()
    client = db.create_client()
    app.state.db = client[db.mongo_db_name()]
    await db.ensure_indexes(app.state.db)
    logger.info("mongo_connected db=%s", db.mongo_db_name())
    try:
        yield
    finally:
        client.close()
        app.state.db = None
        logger.info("mongo_closed")


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router.router, tags=["auth"])
app.include_router(categories_router.router, tags=["categories"])
app.include_router(recipes_router.router, tags=["recipes"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"msg": "recipes api"}


def serve() -> None:
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"
    port = int(os.environ.get("PORT", "3000").strip() or "3000")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    serve()
