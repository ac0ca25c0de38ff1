"""
Test configuration and fixtures for the MetalBaza cart and checkout
"""

import os
from decimal import Decimal
from unittest.mock import patch

import pytest

from metalbaza.container import Container
from metalbaza.infrastructure.configuration.config import reset_config
from metalbaza.infrastructure.database import models
from metalbaza.infrastructure.database.operations import (
    DatabaseManager,
    get_db_manager,
    init_db,
    set_db_manager,
)


@pytest.fixture(autouse=True)
def mock_env(tmp_path):
    """Isolated environment for every test"""
    test_env = {
        "DATABASE_URL": "sqlite://",
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "DEBUG",
        "LOG_DIR": str(tmp_path / "logs"),
        "CURRENCY": "UZS",
        "DEFAULT_LANGUAGE": "uz",
    }

    with patch.dict(os.environ, test_env, clear=True):
        reset_config()
        Container.reset()
        yield test_env
        Container.reset()
        reset_config()


@pytest.fixture
def db_manager():
    """In-memory SQLite database with tables and the default settings row"""
    manager = DatabaseManager(database_url="sqlite://")
    set_db_manager(manager)
    init_db()
    yield manager
    set_db_manager(None)


def _insert(row):
    with get_db_manager().get_session() as session:
        session.add(row)
        session.commit()
        return row.id


@pytest.fixture
def make_user(db_manager):
    """Factory inserting a user and returning its id"""
    counter = {"n": 0}

    def _make_user(telegram_id=None, role="client", language="uz", first_name="Aziz"):
        counter["n"] += 1
        return _insert(
            models.User(
                phone=f"+99890000{counter['n']:04d}",
                first_name=first_name,
                last_name="Karimov",
                telegram_id=telegram_id,
                role=role,
                language=language,
            )
        )

    return _make_user


@pytest.fixture
def make_product(db_manager):
    """Factory inserting a product and returning its id"""

    def _make_product(
        name_uz="Armatura 12mm",
        price="45000",
        delivery_price=None,
        free_delivery_threshold=None,
        is_available=True,
        name_ru=None,
    ):
        row = models.Product(
            name_uz=name_uz,
            name_ru=name_ru,
            price=Decimal(price),
            free_delivery_threshold=(
                None if free_delivery_threshold is None else Decimal(free_delivery_threshold)
            ),
            is_available=is_available,
        )
        if delivery_price is not None:
            row.delivery_price = Decimal(delivery_price)
        return _insert(row)

    return _make_product


@pytest.fixture
def set_company_delivery(db_manager):
    """Switch company-wide delivery on or off"""

    def _set(enabled: bool):
        with get_db_manager().get_session() as session:
            session.query(models.CompanySettings).update({"is_delivery": enabled})
            session.commit()

    return _set


@pytest.fixture
def count_rows(db_manager):
    """Count rows of a model, optionally filtered by user"""

    def _count(model, **filters):
        with get_db_manager().get_session() as session:
            return session.query(model).filter_by(**filters).count()

    return _count
