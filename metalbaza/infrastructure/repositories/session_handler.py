"""
Transactional session scope shared by the SQLAlchemy repositories.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from metalbaza.infrastructure.database.operations import get_session
from metalbaza.infrastructure.utilities.exceptions import MetalBazaError

logger = logging.getLogger(__name__)


@contextmanager
def managed_session(scope: str = "transaction") -> Generator[Session, None, None]:
    """
    One database transaction around the block.

    The session commits when the block exits normally and rolls back on any
    exception, so multi-step writes (order, items, cart clear) land together
    or not at all. ``scope`` names the transaction in the logs.

    Yields:
        Session: The SQLAlchemy session object.

    Raises:
        SQLAlchemyError: If a database-related error occurs.
        MetalBazaError: A business rule aborted the transaction.
    """
    session = get_session()
    try:
        yield session
        session.commit()
        logger.debug("💾 COMMIT: %s", scope)
    except SQLAlchemyError as e:
        logger.error("💥 DATABASE ERROR in %s, rolling back: %s", scope, e)
        session.rollback()
        raise
    except MetalBazaError as e:
        logger.warning("↩️ ROLLBACK %s: %s", scope, e.error_code)
        session.rollback()
        raise
    except Exception as e:
        logger.error("💥 UNEXPECTED ERROR in %s, rolling back: %s", scope, e)
        session.rollback()
        raise
    finally:
        session.close()
