# ABOUTME: Shared pytest fixtures for Shelfkeeper tests.
# ABOUTME: Provides an in-memory snapshot gateway, a fixed clock, and ready-made libraries.

import itertools
from collections.abc import Callable
from datetime import datetime

import pytest

from shelfkeeper.core.library import Library
from shelfkeeper.core.types import BookDetails
from tests.fakes import FailingGateway, FlakyGateway, MemoryGateway

FIXED_NOW = datetime(2024, 1, 1, 9, 30)


@pytest.fixture()
def gateway() -> MemoryGateway:
    return MemoryGateway()


@pytest.fixture()
def failing_gateway() -> FailingGateway:
    return FailingGateway()


@pytest.fixture()
def flaky_gateway() -> FlakyGateway:
    return FlakyGateway()


@pytest.fixture()
def clock() -> Callable[[], datetime]:
    """A clock frozen at 2024-01-01 09:30."""
    return lambda: FIXED_NOW


@pytest.fixture()
def id_factory() -> Callable[[], str]:
    """Predictable 32-character ids: 000...001, 000...002, ..."""
    counter = itertools.count(1)
    return lambda: f"{next(counter):032x}"


@pytest.fixture()
def library(
    gateway: MemoryGateway,
    clock: Callable[[], datetime],
    id_factory: Callable[[], str],
) -> Library:
    """An empty Library backed by an in-memory gateway."""
    return Library.load(gateway, clock=clock, id_factory=id_factory)


@pytest.fixture()
def rose() -> BookDetails:
    """A fully-populated BookDetails for testing."""
    return BookDetails(
        title="The Name of the Rose",
        author="Umberto Eco",
        publisher="Harcourt",
        year=1983,
        language="en",
        page_count=536,
        cover_image_url="https://example.com/rose.jpg",
    )


@pytest.fixture()
def dune() -> BookDetails:
    return BookDetails(title="Dune", author="Frank Herbert", publisher="Chilton")


@pytest.fixture()
def emma() -> BookDetails:
    return BookDetails(title="Emma", author="Jane Austen")
