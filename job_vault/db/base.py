"""Database configuration and the persistence client."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from job_vault.auth import AuthUser, decode_token
from job_vault.config import Settings, settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


class PersistenceClient:
    """Handle to the relational store and the token verifier.

    Constructed explicitly and passed to the application factory. The engine
    is created lazily so the app can start without a configured database.
    """

    def __init__(
        self,
        database_url: str = "",
        jwt_secret: str = "",
        jwt_audience: str = "authenticated",
        engine: Engine | None = None,
    ):
        self.database_url = database_url
        self.jwt_secret = jwt_secret
        self.jwt_audience = jwt_audience
        self._engine = engine
        self._session_factory = None

    @property
    def engine(self) -> Engine:
        """Get or create database engine."""
        if self._engine is None:
            if not self.database_url:
                raise ValueError("DATABASE_URL not configured")
            connect_args = {}
            if self.database_url.startswith("sqlite"):
                connect_args["check_same_thread"] = False
            self._engine = create_engine(
                self.database_url,
                pool_pre_ping=True,  # Test connections before use
                pool_recycle=300,  # Recycle connections after 5 minutes
                connect_args=connect_args,
            )
        return self._engine

    def session(self) -> Session:
        """Open a new session bound to the engine."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        return self._session_factory()

    def get_user(self, token: str) -> AuthUser:
        """Resolve the user identified by a bearer token."""
        return decode_token(token, self.jwt_secret, self.jwt_audience)

    def create_all(self) -> None:
        """Initialize database tables."""
        from job_vault.db import tables  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()


def create_client(config: Settings | None = None) -> PersistenceClient:
    """Build a persistence client from settings."""
    config = config or settings
    return PersistenceClient(
        database_url=config.database_url,
        jwt_secret=config.jwt_secret,
        jwt_audience=config.jwt_audience,
    )
