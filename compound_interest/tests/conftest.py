from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from compound_interest.app import create_app
from compound_interest.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Settings(log_level="WARNING"))
    with flask_app.test_client() as test_client:
        yield test_client
