from dataclasses import dataclass

from sqlalchemy import create_engine, Engine, text
from sqlalchemy.orm import sessionmaker, Session

from config import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT


@dataclass
class SessionWithEngine:
    engine: Engine = None
    session: Session = None


@dataclass
class SessionFactory:
    """
    Owns the process-wide engine and its connection pool. Created once at startup and handed to
    the application explicitly (``app.state.session_factory``), never imported as a global.
    """

    database_url: str
    pool_size: int = DEFAULT_POOL_SIZE
    pool_timeout: float = DEFAULT_POOL_TIMEOUT
    engine: Engine = None
    SessionLocal = None

    def get_refreshed(self) -> SessionWithEngine:
        # max_overflow=0 keeps the number of open connections at pool_size
        self.engine = create_engine(
            self.database_url,
            pool_size=self.pool_size,
            max_overflow=0,
            pool_timeout=self.pool_timeout,
        )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        return SessionWithEngine(engine=self.engine, session=self.SessionLocal())

    def get_session(self) -> SessionWithEngine:
        if self.engine is None:
            return self.get_refreshed()
        return SessionWithEngine(engine=self.engine, session=self.SessionLocal())

    def check_connection(self) -> None:
        if self.engine is None:
            self.get_refreshed()
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
