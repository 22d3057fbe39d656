"""End-to-end tests for the comment endpoints."""

import pytest
from fastapi.testclient import TestClient

from quill.config import Settings
from quill.domain.service import JWTService
from quill.domain.value import Permission
from quill.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import seed_article, seed_user

WRITER_PERMISSIONS = [
    Permission.COMMENT_CREATE,
    Permission.COMMENT_UPDATE,
    Permission.COMMENT_DELETE,
]


async def _seed(container) -> None:
    async with container() as request_container:
        await seed_article(request_container, article_id=1, author_id=1)
        await seed_user(request_container, 2, "alice")
        await seed_user(request_container, 3, "mallory")


@pytest.fixture
def client():
    """Create test client over an in-memory container with seed data."""
    container = build_test_container()
    app_instance = create_app(container=container)
    with TestClient(app_instance, raise_server_exceptions=False) as test_client:
        test_client.portal.call(_seed, container)
        yield test_client


@pytest.fixture
def jwt_service():
    return JWTService(Settings().auth)


def _auth(jwt_service, user_id, permissions=None, roles=None):
    token = jwt_service.create_token(
        user_id,
        roles=roles,
        permissions=WRITER_PERMISSIONS if permissions is None else permissions,
    )
    return {"Authorization": f"Bearer {token}"}


def _post(client, headers, content, parent_id=None, article_id=1):
    body = {"articleId": article_id, "content": content}
    if parent_id is not None:
        body["parentId"] = parent_id
    return client.post("/comment", json=body, headers=headers)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "healthy"
        assert data["cacheBackend"] in {"memory", "redis"}


class TestCreateComment:
    """POST /comment."""

    def test_create_top_level(self, client, jwt_service):
        """Should return the created comment in the envelope."""
        # Act
        response = _post(client, _auth(jwt_service, 2), "First!")

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["code"] == 201
        assert body["message"] == "success"
        assert isinstance(body["timestamp"], int)

        data = body["data"]
        assert data["content"] == "First!"
        assert data["articleId"] == 1
        assert data["parentId"] is None
        assert data["rootId"] == data["id"]
        assert data["replyCount"] == 0
        assert data["author"]["username"] == "alice"
        assert data["author"]["equippedDecorations"] == {}

    def test_create_reply(self, client, jwt_service):
        headers = _auth(jwt_service, 2)
        root = _post(client, headers, "A").json()["data"]

        response = _post(client, headers, "B", parent_id=root["id"])

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["parentId"] == root["id"]
        assert data["rootId"] == root["id"]

    def test_token_from_cookie(self, client, jwt_service):
        """The auth_token cookie is accepted in place of the header."""
        token = jwt_service.create_token(2, permissions=WRITER_PERMISSIONS)
        client.cookies.set("auth_token", token)

        response = _post(client, {}, "via cookie")

        assert response.status_code == 201

    def test_unauthenticated(self, client):
        """Should return 401 with an empty data field."""
        response = _post(client, {}, "anonymous")

        assert response.status_code == 401
        body = response.json()
        assert body["code"] == 401
        assert body["data"] is None

    def test_missing_permission(self, client, jwt_service):
        response = _post(client, _auth(jwt_service, 2, permissions=[]), "nope")

        assert response.status_code == 403
        assert "comment:create" in response.json()["message"]

    def test_missing_parent(self, client, jwt_service):
        response = _post(client, _auth(jwt_service, 2), "orphan", parent_id=999)

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == 404
        assert "Comment not found" in body["message"]

    def test_missing_article(self, client, jwt_service):
        response = _post(client, _auth(jwt_service, 2), "lost", article_id=404)

        assert response.status_code == 404

    def test_empty_content(self, client, jwt_service):
        response = _post(client, _auth(jwt_service, 2), "")

        assert response.status_code == 400
        assert response.json()["code"] == 400


class TestReadComments:
    """GET endpoints."""

    def _thread(self, client, jwt_service):
        headers = _auth(jwt_service, 2)
        a = _post(client, headers, "A").json()["data"]
        b = _post(client, headers, "B", parent_id=a["id"]).json()["data"]
        c = _post(client, headers, "C", parent_id=b["id"]).json()["data"]
        return a, b, c

    def test_thread(self, client, jwt_service):
        """The thread holds the root and every reply below it."""
        a, b, c = self._thread(client, jwt_service)

        response = client.get(f"/comment/{c['id']}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["item"]["id"] == a["id"]
        assert [i["id"] for i in data["nestedList"]["data"]] == [b["id"], c["id"]]
        assert data["nestedList"]["meta"] == {
            "total": 2,
            "page": 1,
            "limit": 10,
            "totalPages": 1,
        }

    def test_replies(self, client, jwt_service):
        a, b, _ = self._thread(client, jwt_service)

        response = client.get(f"/comment/{a['id']}/replies", params={"limit": 1})

        assert response.status_code == 200
        data = response.json()["data"]
        assert [i["id"] for i in data["data"]] == [b["id"]]
        assert data["meta"]["totalPages"] == 1

    def test_zero_limit_is_bad_request(self, client, jwt_service):
        a, _, _ = self._thread(client, jwt_service)

        response = client.get(f"/comment/{a['id']}/replies", params={"limit": 0})

        assert response.status_code == 400

    def test_missing_comment(self, client):
        response = client.get("/comment/12345")

        assert response.status_code == 404
        assert response.json()["data"] is None

    def test_article_comments_with_previews(self, client, jwt_service):
        a, b, _ = self._thread(client, jwt_service)

        response = client.get("/comment/article/1")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [i["id"] for i in data["data"]] == [a["id"]]
        assert [r["id"] for r in data["data"][0]["replies"]] == [b["id"]]
        assert data["meta"]["total"] == 1

    def test_article_count(self, client, jwt_service):
        self._thread(client, jwt_service)

        response = client.get("/comment/article/1/count")

        assert response.status_code == 200
        assert response.json()["data"] == {"articleId": 1, "count": 3}

    def test_user_comments(self, client, jwt_service):
        self._thread(client, jwt_service)

        response = client.get("/comment/user/2", params={"page": 2, "limit": 2})

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["data"]) == 1
        assert data["meta"]["totalPages"] == 2


class TestWriteComments:
    """PATCH and DELETE endpoints."""

    def test_update_by_author(self, client, jwt_service):
        headers = _auth(jwt_service, 2)
        comment = _post(client, headers, "typo").json()["data"]

        response = client.patch(
            f"/comment/{comment['id']}", json={"content": "fixed"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["data"]["content"] == "fixed"

    def test_update_by_other_user(self, client, jwt_service):
        comment = _post(client, _auth(jwt_service, 2), "mine").json()["data"]

        response = client.patch(
            f"/comment/{comment['id']}",
            json={"content": "yours now"},
            headers=_auth(jwt_service, 3),
        )

        assert response.status_code == 403

    def test_moderate_requires_manage(self, client, jwt_service):
        comment = _post(client, _auth(jwt_service, 2), "spam").json()["data"]
        url = f"/comment/{comment['id']}/status"

        denied = client.patch(
            url, json={"status": "REJECTED"}, headers=_auth(jwt_service, 2)
        )
        allowed = client.patch(
            url,
            json={"status": "REJECTED"},
            headers=_auth(jwt_service, 3, permissions=[Permission.COMMENT_MANAGE]),
        )

        assert denied.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["data"]["status"] == "REJECTED"

    def test_delete_hides_content(self, client, jwt_service):
        """A deleted root still anchors its thread, without content."""
        headers = _auth(jwt_service, 2)
        root = _post(client, headers, "A").json()["data"]
        reply = _post(client, headers, "B", parent_id=root["id"]).json()["data"]

        response = client.delete(f"/comment/{root['id']}", headers=headers)

        assert response.status_code == 200
        assert response.json()["data"] is None

        thread = client.get(f"/comment/{reply['id']}").json()["data"]
        assert thread["item"]["status"] == "DELETED"
        assert thread["item"]["content"] is None
        assert [i["id"] for i in thread["nestedList"]["data"]] == [reply["id"]]

    def test_article_author_can_delete(self, client, jwt_service):
        comment = _post(client, _auth(jwt_service, 2), "hm").json()["data"]

        response = client.delete(
            f"/comment/{comment['id']}", headers=_auth(jwt_service, 1)
        )

        assert response.status_code == 200

    def test_stranger_cannot_delete(self, client, jwt_service):
        comment = _post(client, _auth(jwt_service, 2), "hm").json()["data"]

        response = client.delete(
            f"/comment/{comment['id']}", headers=_auth(jwt_service, 3)
        )

        assert response.status_code == 403


class TestLikes:
    """POST and DELETE /comment/{id}/like."""

    def test_like_and_unlike(self, client, jwt_service):
        comment = _post(client, _auth(jwt_service, 2), "like me").json()["data"]
        url = f"/comment/{comment['id']}/like"
        headers = _auth(jwt_service, 3, permissions=[])

        liked = client.post(url, headers=headers)
        again = client.post(url, headers=headers)
        unliked = client.delete(url, headers=headers)
        not_liked = client.delete(url, headers=headers)

        assert liked.status_code == 200
        assert liked.json()["data"] == {
            "commentId": comment["id"],
            "liked": True,
            "likes": 1,
        }
        assert again.status_code == 409
        assert unliked.json()["data"]["likes"] == 0
        assert not_liked.status_code == 404

    def test_like_requires_login(self, client, jwt_service):
        comment = _post(client, _auth(jwt_service, 2), "like me").json()["data"]

        response = client.post(f"/comment/{comment['id']}/like")

        assert response.status_code == 401
