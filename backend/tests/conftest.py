from datetime import date

import pytest

from splitledger import create_app
from splitledger.config import TestConfig
from splitledger.expenses.models import Expense
from splitledger.storage.memory import InMemoryRepository
from splitledger.users.model import Category, Participant

ROSTER = ["alice", "bob", "carol"]


@pytest.fixture
def roster():
    return list(ROSTER)


@pytest.fixture
def dinner():
    """Alice pays 90, split among all three."""
    return Expense(
        id="e1",
        amount="90",
        payer_id="alice",
        split_among=ROSTER,
        date=date(2024, 5, 1),
        category_id="food",
        description="Dinner",
    )


@pytest.fixture
def repository(dinner):
    return InMemoryRepository(
        participants=[
            Participant("alice", "Alice"),
            Participant("bob", "Bob"),
            Participant("carol", "Carol"),
        ],
        categories=[Category("food", "Food & Dining")],
        expenses=[dinner],
    )


@pytest.fixture
def app(repository):
    return create_app(TestConfig, repository=repository)


@pytest.fixture
def client(app):
    return app.test_client()
