"""Shared pytest fixtures."""

import os

# Keep the default database out of the working tree during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CAKESHOP_PERSIST_HISTORY", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cakeshop.database import Base
from cakeshop.patterns import singleton
from cakeshop.patterns.factory import CakeCatalog
from cakeshop.patterns.observer import OrderObserver
from cakeshop.patterns.singleton import OrderCoordinator


class RecordingSink(OrderObserver):
    """Sink that remembers what it was told, and in which order."""

    def __init__(self, name="sink", journal=None):
        self.name = name
        self.received = []
        self.journal = journal if journal is not None else []

    def notify(self, cake):
        self.received.append(cake)
        self.journal.append((self.name, cake.order_id))


@pytest.fixture
def catalog():
    return CakeCatalog()


@pytest.fixture
def coordinator(catalog):
    return OrderCoordinator(catalog)


@pytest.fixture
def journal():
    return []


@pytest.fixture
def recording_sink(journal):
    return RecordingSink("recorder", journal)


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture(autouse=True)
def reset_process_coordinator():
    singleton.reset_instance()
    yield
    singleton.reset_instance()
