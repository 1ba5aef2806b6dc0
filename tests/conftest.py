import pytest

from webapp import AppState, create_app


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def app(state):
    app = create_app(state)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
