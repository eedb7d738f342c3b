from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from wealthcalc.app import create_app
from wealthcalc.config import Settings


@pytest.fixture()
def app():
    return create_app(Settings())


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
