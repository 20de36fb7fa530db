import logging
import sys

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, SQLAlchemyError  # Import specific exceptions

logger = logging.getLogger(__name__)


def verify_database_connection(engine: Engine) -> bool:
    """
    Runs a trivial query against the database behind `engine`.

    Logs "DB ready" on success. Failures are logged and reported through the
    return value so callers (the startup hook, the CLI) decide what to do.
    """
    # render_as_string masks the password by default
    logger.info("Checking database connection: %s", engine.url.render_as_string())

    try:
        # The 'with' statement returns the connection to the pool afterwards
        with engine.connect() as connection:
            result = connection.execute(text("SELECT 1 AS ok"))
            logger.info("DB ready: %s", dict(result.mappings().one()))
        return True

    except OperationalError as op_e:
        # Server down, wrong host/port, timeout, TLS refused...
        logger.error("DB boot check failed: %s", op_e)
        return False

    except SQLAlchemyError as e:
        logger.error("DB boot check failed (SQLAlchemy error): %s", e)
        return False


if __name__ == "__main__":
    from buildmate.core.config import settings
    from buildmate.core.logging import setup_logging
    from buildmate.db.database import get_engine

    setup_logging(settings.LOG_LEVEL)
    engine = get_engine()
    try:
        ok = verify_database_connection(engine)
    finally:
        engine.dispose()
    sys.exit(0 if ok else 1)
