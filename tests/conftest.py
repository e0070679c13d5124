"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from kanowins.app import app
from kanowins.config import Settings

TEST_VERIFICATION_TOKEN = "verify-token-1234"
TEST_ACCESS_TOKEN = "xoxb-test"


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def settings() -> Settings:
    """Explicit settings so tests never depend on the environment."""
    return Settings(
        region="us-east-1",
        table_name="wins-test",
        slack_verification_token=TEST_VERIFICATION_TOKEN,
        slack_access_token=TEST_ACCESS_TOKEN,
    )
