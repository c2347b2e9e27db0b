import logging
from contextlib import AsyncExitStack, asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from userhub import __version__
from userhub.cache import RedisCache
from userhub.config import Settings, settings as default_settings
from userhub.database import build_engine, build_session_factory
from userhub.graphql_api import create_graphql_router
from userhub.grpc_api.server import create_grpc_server
from userhub.log import configure_logging
from userhub.middleware import TimingMiddleware
from userhub.repositories import SqlAlchemyUserRepository
from userhub.services.user_service import UserService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Own every process-wide resource: the connection pool, the Redis client
    and the gRPC server are opened here once and closed on shutdown.

    Each resource registers its cleanup as soon as it exists, so a failure
    later in startup still releases whatever was already opened.
    """
    cfg: Settings = app.state.settings

    async with AsyncExitStack() as stack:
        engine = build_engine(cfg.database_url, echo=cfg.DEBUG)
        stack.push_async_callback(engine.dispose)
        logger.info("Connecting to database...")
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection established")

        cache = RedisCache(cfg.redis_url)
        stack.push_async_callback(cache.disconnect)
        await cache.connect()

        service = UserService(SqlAlchemyUserRepository(build_session_factory(engine)), cache)
        app.state.user_service = service

        grpc_server, grpc_port = create_grpc_server(service, f"[::]:{cfg.GRPC_PORT}")
        stack.push_async_callback(grpc_server.stop, cfg.GRPC_SHUTDOWN_GRACE)
        await grpc_server.start()
        logger.info("gRPC server listening on port %d", grpc_port)

        yield
        logger.info("Shutting down...")
    logger.info("Server exited")


def create_app(cfg: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="userhub",
        description="User CRUD over gRPC and GraphQL",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = cfg or default_settings

    # Middleware
    app.add_middleware(TimingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # GraphQL endpoint with the GraphiQL IDE on GET
    app.include_router(create_graphql_router(), prefix="/graphql")

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": __version__}

    return app


app = create_app()


def run() -> None:  # pragma: no cover
    configure_logging(default_settings.LOG_LEVEL)
    logger.info("Starting GraphQL server on port %d", default_settings.HTTP_PORT)
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=default_settings.HTTP_PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":  # pragma: no cover
    run()
