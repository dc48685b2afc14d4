import threading
from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings
from app.core.exceptions import StartupFatalError


def create_store_engine(database_url: str):
    """Create an engine for the embedded store with foreign keys enforced."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sessions are handed across FastAPI's worker threads; store_lock serializes them
        connect_args["check_same_thread"] = False

    store_engine = create_engine(database_url, connect_args=connect_args)

    if store_engine.dialect.name == "sqlite":
        @event.listens_for(store_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return store_engine


engine = create_store_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# One logical operation touches the store at a time
store_lock = threading.Lock()


@contextmanager
def locked_session(session_factory=None):
    """Hold the store lock for the lifetime of a session."""
    factory = session_factory or SessionLocal
    with store_lock:
        db = factory()
        try:
            yield db
        finally:
            db.close()


# Dependency to get DB session
def get_db():
    with locked_session() as db:
        yield db


# Function to initialize the database
def init_db(bind=None):
    # Import all models here
    from app.country.models.country_model import Country
    from app.competitions.models.competition_model import Competition

    try:
        # Use context manager to ensure connection is released
        with (bind or engine).begin() as conn:
            Base.metadata.create_all(bind=conn)
    except SQLAlchemyError as e:
        raise StartupFatalError(f"Could not open or create the store: {e}") from e
