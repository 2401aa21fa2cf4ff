from sqlalchemy import create_engine, select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================


def build_engine_options() -> dict:
    """
    Engine keyword arguments for the configured database.

    PostgreSQL gets the full pool configuration and TLS without certificate
    verification. Anything else (SQLite for local runs) uses the dialect defaults.
    """
    if not settings.is_postgres():
        return {
            "echo": settings.DB_ECHO_SQL,
            "echo_pool": settings.DB_ECHO_SQL,
            "connect_args": {"check_same_thread": False},
        }

    return {
        # Connection pool settings
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,

        # Test connection before using (detect disconnects)
        "pool_pre_ping": True,

        "echo": settings.DB_ECHO_SQL,
        "echo_pool": settings.DB_ECHO_SQL,

        "connect_args": {
            "connect_timeout": 10,
            "sslmode": settings.DB_SSLMODE,
        },
    }


engine = create_engine(settings.DB_CONNECTION, **build_engine_options())


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False  # Keep attributes readable after commit/delete
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables():
    """
    Create all tables defined in models if they don't exist yet.

    Safe to call on every startup: existing tables are left untouched.
    """
    # Register models on Base.metadata
    from app.models import student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("✅ Students table ready!")


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Borrows a connection from the pool and asks the server for its clock.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            now = connection.execute(select(func.current_timestamp())).scalar()
        logger.info("✅ Connected to database successfully!")
        logger.info(f"⏰ Database time: {now}")
        return True
    except Exception as e:
        logger.error(f"❌ Database connection error: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db() -> bool:
    """
    Initialize database.
    Run this when starting the application.

    Returns False when the database is unreachable. A failure while creating
    the table is logged but does not stop startup.
    """
    logger.info("Initializing database...")

    if not check_database_connection():
        return False

    try:
        create_database_tables()
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating table: {e}")

    logger.info("✅ Database initialized successfully!")
    return True


if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    if check_database_connection():
        print("✅ Connection successful!")
    else:
        print("❌ Connection failed!")
