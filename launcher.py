import os
import sys
import time
from typing import List

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

import logs
from common.session import SessionFactory
from config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    MissingConfigurationError,
    database_url,
    list_failure_policy,
    origins,
    pool_size,
    reload_configuration,
    save_failure_policy,
    startup_delay,
)

logger = logs.Log("launcher", "launcher.log").get_logger()


def default_routers() -> List[APIRouter]:
    from routes import router
    from tabs.routes import router as tabs_router

    return [router, tabs_router]


def connect() -> SessionFactory:
    """
    Build the shared session factory and make sure the database answers.
    Any failure here is fatal, the process exits with a diagnostic message.
    """
    try:
        url = database_url()
    except MissingConfigurationError as e:
        logger.error(str(e))
        sys.exit(str(e))

    try:
        size = pool_size()
    except ValueError as e:
        logger.error(f"Invalid DB_POOL_SIZE: {e}")
        sys.exit(f"Invalid DB_POOL_SIZE: {e}")

    session_factory = SessionFactory(database_url=url, pool_size=size)
    try:
        session_factory.check_connection()
    except SQLAlchemyError as e:
        logger.exception("Failed to connect to the database")
        sys.exit(f"Failed to connect to the database: {e}")

    logger.info("Successfully connected to the database")
    return session_factory


def create_app(
    session_factory: SessionFactory,
    routers: List[APIRouter] = None,
    list_policy: str = None,
    save_policy: str = None,
) -> FastAPI:
    app = FastAPI(
        title="Tabs API",
        description="Stores the tab tree of the Miller column editor.",
    )

    app.state.session_factory = session_factory
    app.state.list_failure_policy = list_policy or list_failure_policy()
    app.state.save_failure_policy = save_policy or save_failure_policy()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("shutdown")
    def shutdown_event():
        logger.debug("Shutting down server")
        session_factory.dispose()

    for router in routers or default_routers():
        app.include_router(router)

    return app


def create_parser():
    import argparse

    arg_parser = argparse.ArgumentParser(description="Run the tabs web server")
    arg_parser.add_argument(
        "--host",
        type=str,
        default=os.getenv("HOST", DEFAULT_HOST),
        help="Host to run the app on (default: %(default)s)",
    )
    arg_parser.add_argument(
        "--port",
        type=int,
        default=os.getenv("PORT", DEFAULT_PORT),
        help="Port to run the app on (default: %(default)s)",
    )
    return arg_parser


def main(argv: List[str] = None):
    import uvicorn

    reload_configuration()
    args = create_parser().parse_args(argv)

    try:
        delay = startup_delay()
    except ValueError as e:
        logger.error(f"Invalid STARTUP_DELAY: {e}")
        sys.exit(f"Invalid STARTUP_DELAY: {e}")

    # give the database container time to come up, this is not a retry
    time.sleep(delay)

    session_factory = connect()
    try:
        app = create_app(session_factory)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(str(e))

    logger.info(f"Server running on {args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, reload=False, workers=1)


if __name__ == "__main__":
    main()
