import pytest

from bridge.app.config import Settings
from bridge.app.main import create_app
from bridge.market.synthetic import SyntheticQuoteProvider
from bridge.state.store import RecordStore


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def app(store):
    app = create_app(
        Settings(), store=store, provider=SyntheticQuoteProvider(seed=7)
    )
    app.config.update({"TESTING": True})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
