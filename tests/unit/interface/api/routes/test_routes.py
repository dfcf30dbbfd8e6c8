"""Unit tests for the HTTP routes.

The in-memory stores are request-scoped, so each HTTP call sees empty
repositories. These tests cover authentication, validation and error
mapping rather than persisted state.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from paracosm.config import AuthSettings
from paracosm.interface.api.app import create_app
from paracosm.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def authed_client():
    app = create_app(build_test_container())
    token = create_token(str(uuid4()), "lorekeeper", AuthSettings())
    with TestClient(app, cookies={"auth_token": token}) as test_client:
        yield test_client


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "paracosm-api"


class TestCommentRoutes:
    """Tests for /posts/{post_id}/comments."""

    def test_thread_of_missing_post(self, client):
        response = client.get(f"/posts/{uuid4()}/comments")

        assert response.status_code == 404

    def test_thread_with_malformed_post_id(self, client):
        response = client.get("/posts/not-a-uuid/comments")

        assert response.status_code == 400

    def test_create_requires_authentication(self, client):
        response = client.post(f"/posts/{uuid4()}/comments", json={"text": "Hi"})

        assert response.status_code == 401

    def test_create_with_invalid_token(self, client):
        client.cookies.set("auth_token", "garbage")

        response = client.post(f"/posts/{uuid4()}/comments", json={"text": "Hi"})

        assert response.status_code == 401

    def test_create_blank_text(self, authed_client):
        response = authed_client.post(
            f"/posts/{uuid4()}/comments", json={"text": "   "}
        )

        assert response.status_code == 400

    def test_padded_text_at_limit_passes_validation(self, authed_client):
        """Surrounding whitespace does not count towards the length limit."""
        response = authed_client.post(
            f"/posts/{uuid4()}/comments", json={"text": " " + "x" * 10000 + " "}
        )

        # Past validation, the post lookup runs and finds nothing
        assert response.status_code == 404

    def test_create_on_missing_post(self, authed_client):
        response = authed_client.post(
            f"/posts/{uuid4()}/comments", json={"text": "Hello there"}
        )

        assert response.status_code == 404

    def test_delete_requires_authentication(self, client):
        response = client.delete(f"/posts/{uuid4()}/comments/{uuid4()}")

        assert response.status_code == 401

    def test_delete_missing_comment(self, authed_client):
        response = authed_client.delete(f"/posts/{uuid4()}/comments/{uuid4()}")

        assert response.status_code == 404


class TestVoteRoutes:
    """Tests for /votes/{target_kind}/{target_id}."""

    def test_state_of_missing_target(self, client):
        response = client.get(f"/votes/question/{uuid4()}")

        assert response.status_code == 404

    def test_unknown_target_kind(self, client):
        response = client.get(f"/votes/world/{uuid4()}")

        assert response.status_code == 422

    def test_cast_requires_authentication(self, client):
        response = client.post(
            f"/votes/community_post/{uuid4()}", json={"direction": "upvote"}
        )

        assert response.status_code == 401

    def test_cast_on_missing_target(self, authed_client):
        response = authed_client.post(
            f"/votes/community_comment/{uuid4()}", json={"direction": "downvote"}
        )

        assert response.status_code == 404

    def test_cast_with_unknown_direction(self, authed_client):
        response = authed_client.post(
            f"/votes/question/{uuid4()}", json={"direction": "sideways"}
        )

        assert response.status_code == 422

    def test_cast_with_malformed_target_id(self, authed_client):
        response = authed_client.post(
            "/votes/question/not-a-uuid", json={"direction": "upvote"}
        )

        assert response.status_code == 400
