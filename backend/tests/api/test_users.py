"""
Tests for the account endpoint.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_trial_service
from modules.trial.exceptions import ProfileNotFoundError
from modules.trial.models import TrialProfile

from tests.conftest import TEST_JWT_SECRET


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def trial_service():
    return MagicMock()


@pytest.fixture
def client(app, trial_service):
    app.dependency_overrides[get_trial_service] = lambda: trial_service
    with patch("api.middleware.auth.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        yield TestClient(app)
    app.dependency_overrides.clear()


class TestGetAccount:
    """Tests for GET /api/users/me"""

    def test_user_in_trial(self, client, trial_service, auth_headers):
        now = datetime.now(timezone.utc)
        trial_service.get_profile = AsyncMock(return_value=TrialProfile(
            trial_active=True,
            trial_start=now - timedelta(days=3),
            trial_end=now + timedelta(days=18),
        ))

        response = client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "test-user-123"
        assert data["email"] == "test@example.com"
        assert data["has_profile"] is True
        assert data["trial_active"] is True
        assert data["subscription_status"] is None
        trial_service.get_profile.assert_awaited_once_with("test-user-123")

    def test_subscribed_user(self, client, trial_service, auth_headers):
        trial_service.get_profile = AsyncMock(return_value=TrialProfile(
            trial_active=False,
            stripe_subscription_status="active",
        ))

        data = client.get("/api/users/me", headers=auth_headers).json()

        assert data["trial_active"] is False
        assert data["subscription_status"] == "active"

    def test_missing_profile_is_not_an_error(self, client, trial_service, auth_headers):
        trial_service.get_profile = AsyncMock(side_effect=ProfileNotFoundError("test-user-123"))

        response = client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["has_profile"] is False
        assert data["trial_active"] is False

    def test_requires_auth(self, client):
        assert client.get("/api/users/me").status_code == 401
