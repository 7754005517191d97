import logging, uvicorn
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

import core.config as config
from app.routers import register_routers
from database.base import DATABASE_URL
from database.session import build_engine, build_sessionmaker, init_db

logging.basicConfig(level=config.LOG_LEVEL)
log = logging.getLogger("uvicorn")


def create_app(database_url: Optional[str] = None) -> FastAPI:
    url = database_url or DATABASE_URL

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # startup: tables must exist before the first request is served
        engine = build_engine(url)
        try:
            init_db(engine)
        except Exception:
            log.exception("database initialization failed")
            engine.dispose()
            raise
        app.state.engine = engine
        app.state.SessionLocal = build_sessionmaker(engine)
        log.info("database ready")
        try:
            yield
        finally:
            # shutdown
            engine.dispose()
            log.info("database pool disposed")

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=config.CORS_METHODS,
        allow_headers=["*"],
    )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        log.error("database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "database error"})

    register_routers(app)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
    )
