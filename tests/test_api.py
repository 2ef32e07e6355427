"""
SocialNet Backend — API Integration Tests
=========================================

What:  End-to-end tests through the ASGI app with a real (SQLite) database.
How:   HTTPX AsyncClient over ASGITransport; every test gets a fresh schema
       from the `database` fixture.

What we test:
    ✅ Register → login → post → feed, with camelCase JSON
    ✅ Authentication outcomes: 401 no token, 400 bad/expired token
    ✅ Tokens for accounts that no longer exist cannot write
    ✅ Group membership: 201 member, 403 non-member, 404 unknown group
    ✅ Group posts stay out of the public feed
    ✅ Direct messages: sender is the caller, unknown receiver → 404
    ✅ Every error body is {"message": ...}
"""

import uuid
from datetime import timedelta

import pytest

from socialnet.config import settings
from socialnet.middleware.request_id import REQUEST_ID_HEADER
from socialnet.security.tokens import TokenService


def _auth(user):
    return {"Authorization": user["token"]}


class TestHomeAndHealth:

    @pytest.mark.asyncio
    async def test_home(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to the Social Media API"}

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        """The SQLite test database should report as connected."""
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/", headers={REQUEST_ID_HEADER: "abc123"})
        assert response.headers[REQUEST_ID_HEADER] == "abc123"

    @pytest.mark.asyncio
    async def test_unknown_route_uses_message_body(self, test_client):
        response = await test_client.get("/does-not-exist")
        assert response.status_code == 404
        assert set(response.json()) == {"message"}


class TestUsers:

    @pytest.mark.asyncio
    async def test_register_and_login(self, test_client):
        """Login returns the public profile plus a token, never the hash."""
        response = await test_client.post(
            "/users/register",
            json={"username": "alice", "email": "a@x.io", "password": "pw1"},
        )
        assert response.status_code == 201
        assert response.json() == {"message": "User registered successfully"}

        response = await test_client.post("/users/login", json={"email": "a@x.io", "password": "pw1"})
        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alice"
        assert body["email"] == "a@x.io"
        assert body["profilePic"] == ""
        assert body["token"]
        assert "pw1" not in response.text
        assert "password" not in " ".join(body)

    @pytest.mark.asyncio
    async def test_duplicate_email_creates_no_record(self, test_client, register_user):
        await register_user("alice")

        response = await test_client.post(
            "/users/register",
            json={"username": "alice2", "email": "alice@example.com", "password": "pw"},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Email already registered"}

        users = (await test_client.get("/users")).json()
        assert [u["username"] for u in users] == ["alice"]

    @pytest.mark.asyncio
    async def test_email_is_case_insensitive(self, test_client, register_user):
        """Emails are stored lowercased, so case variants collide and log in alike."""
        await register_user("alice")

        response = await test_client.post(
            "/users/register",
            json={"username": "alice2", "email": "ALICE@Example.com", "password": "pw"},
        )
        assert response.status_code == 400

        response = await test_client.post(
            "/users/login", json={"email": "Alice@EXAMPLE.com", "password": "pw1"}
        )
        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, test_client):
        response = await test_client.post("/users/login", json={"email": "no@x.io", "password": "pw"})
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, test_client, register_user):
        await register_user("alice")
        response = await test_client.post(
            "/users/login", json={"email": "alice@example.com", "password": "wrong"}
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid password"}

    @pytest.mark.asyncio
    async def test_validation_error_is_400_with_message(self, test_client):
        """Missing fields map to 400 (not 422) with a readable message."""
        response = await test_client.post("/users/register", json={"username": "alice"})
        assert response.status_code == 400
        body = response.json()
        assert set(body) == {"message"}
        assert "email" in body["message"]

    @pytest.mark.asyncio
    async def test_me(self, test_client, register_user):
        alice = await register_user("alice")
        response = await test_client.get("/users/me", headers=_auth(alice))
        assert response.status_code == 200
        assert response.json()["id"] == alice["id"]


class TestAuthentication:

    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, test_client):
        response = await test_client.post("/posts", json={"content": "hello"})
        assert response.status_code == 401
        assert response.json() == {"message": "Access denied"}

    @pytest.mark.asyncio
    async def test_garbage_token_is_400(self, test_client):
        response = await test_client.post(
            "/posts", json={"content": "hello"}, headers={"Authorization": "garbage"}
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid token"}

    @pytest.mark.asyncio
    async def test_expired_token_is_400(self, test_client, register_user):
        alice = await register_user("alice")
        expired = TokenService(
            secret_key=settings.jwt_secret, expires_delta=timedelta(seconds=-30)
        ).issue(uuid.UUID(alice["id"]))

        response = await test_client.post(
            "/posts", json={"content": "hello"}, headers={"Authorization": expired}
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid token"}

    @pytest.mark.asyncio
    async def test_bearer_prefix_accepted(self, test_client, register_user):
        alice = await register_user("alice")
        response = await test_client.post(
            "/posts",
            json={"content": "hello"},
            headers={"Authorization": f"Bearer {alice['token']}"},
        )
        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_rejected_request_stores_nothing(self, test_client):
        await test_client.post("/posts", json={"content": "hello"}, headers={"Authorization": "bad"})
        response = await test_client.get("/posts")
        assert response.json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", ["Bearer", "bearer   "])
    async def test_scheme_without_token_is_401(self, test_client, header):
        """A bare scheme carries no credential."""
        response = await test_client.post(
            "/posts", json={"content": "hello"}, headers={"Authorization": header}
        )
        assert response.status_code == 401
        assert response.json() == {"message": "Access denied"}

    @pytest.mark.asyncio
    async def test_token_for_missing_account_cannot_write(self, test_client, register_user):
        """Signed tokens outliving their account are refused; the feed stays readable."""
        ghost = TokenService(secret_key=settings.jwt_secret).issue(uuid.uuid4())
        bob = await register_user("bob")

        response = await test_client.post(
            "/posts", json={"content": "orphan"}, headers={"Authorization": ghost}
        )
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

        response = await test_client.post(
            "/messages",
            json={"receiver": bob["id"], "content": "orphan"},
            headers={"Authorization": ghost},
        )
        assert response.status_code == 404

        feed = await test_client.get("/posts")
        assert feed.status_code == 200
        assert feed.json() == []


class TestPosts:

    @pytest.mark.asyncio
    async def test_post_appears_in_feed_with_author(self, test_client, register_user):
        """The canonical flow: register, login, post, read the feed."""
        alice = await register_user("alice")

        response = await test_client.post(
            "/posts", json={"content": "hello", "images": []}, headers=_auth(alice)
        )
        assert response.status_code == 201
        created = response.json()
        assert created["author"] == alice["id"]
        assert created["content"] == "hello"
        assert created["group"] is None
        assert "createdAt" in created

        feed = (await test_client.get("/posts")).json()
        assert len(feed) == 1
        assert feed[0]["id"] == created["id"]
        assert feed[0]["author"]["username"] == "alice"
        assert feed[0]["author"]["id"] == alice["id"]

    @pytest.mark.asyncio
    async def test_body_author_is_ignored(self, test_client, register_user):
        alice = await register_user("alice")
        bob = await register_user("bob")

        response = await test_client.post(
            "/posts", json={"content": "spoof", "author": bob["id"]}, headers=_auth(alice)
        )
        assert response.status_code == 201
        assert response.json()["author"] == alice["id"]

    @pytest.mark.asyncio
    async def test_feed_is_newest_first(self, test_client, register_user):
        alice = await register_user("alice")
        for text in ("first", "second"):
            await test_client.post("/posts", json={"content": text}, headers=_auth(alice))

        feed = (await test_client.get("/posts")).json()
        assert [p["content"] for p in feed] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, test_client, register_user):
        alice = await register_user("alice")
        response = await test_client.post("/posts", json={"content": "   "}, headers=_auth(alice))
        assert response.status_code == 400
        assert set(response.json()) == {"message"}


class TestGroups:

    async def _create_group(self, client, owner, members=()):
        response = await client.post(
            "/groups",
            json={"name": "G", "description": "d", "members": list(members)},
            headers=_auth(owner),
        )
        assert response.status_code == 201, response.text
        return response.json()

    @pytest.mark.asyncio
    async def test_creator_is_member(self, test_client, register_user):
        alice = await register_user("alice")
        bob = await register_user("bob")

        group = await self._create_group(test_client, alice, [bob["id"]])

        assert group["members"] == [alice["id"], bob["id"]]

    @pytest.mark.asyncio
    async def test_unknown_member_is_404(self, test_client, register_user):
        alice = await register_user("alice")
        response = await test_client.post(
            "/groups",
            json={"name": "G", "members": [str(uuid.uuid4())]},
            headers=_auth(alice),
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_member_can_post_non_member_cannot(self, test_client, register_user):
        """403 for outsiders, and their attempt leaves no post behind."""
        alice = await register_user("alice")
        carol = await register_user("carol")
        group = await self._create_group(test_client, alice)
        url = f"/groups/{group['id']}/posts"

        response = await test_client.post(url, json={"content": "intruder"}, headers=_auth(carol))
        assert response.status_code == 403
        assert response.json() == {"message": "You are not a member of this group"}

        response = await test_client.post(url, json={"content": "inside"}, headers=_auth(alice))
        assert response.status_code == 201
        assert response.json()["group"] == group["id"]

        feed = (await test_client.get(url)).json()
        assert [p["content"] for p in feed] == ["inside"]
        assert feed[0]["author"]["username"] == "alice"

    @pytest.mark.asyncio
    async def test_group_posts_not_in_public_feed(self, test_client, register_user):
        alice = await register_user("alice")
        group = await self._create_group(test_client, alice)

        await test_client.post(f"/groups/{group['id']}/posts", json={"content": "private"}, headers=_auth(alice))
        await test_client.post("/posts", json={"content": "public"}, headers=_auth(alice))

        feed = (await test_client.get("/posts")).json()
        assert [p["content"] for p in feed] == ["public"]

    @pytest.mark.asyncio
    async def test_unknown_group_is_404(self, test_client, register_user):
        alice = await register_user("alice")
        url = f"/groups/{uuid.uuid4()}/posts"

        assert (await test_client.get(url)).status_code == 404
        response = await test_client.post(url, json={"content": "x"}, headers=_auth(alice))
        assert response.status_code == 404
        assert response.json() == {"message": "Group not found"}

    @pytest.mark.asyncio
    async def test_malformed_group_id_is_400(self, test_client):
        response = await test_client.get("/groups/not-a-uuid/posts")
        assert response.status_code == 400
        assert set(response.json()) == {"message"}


class TestMessages:

    @pytest.mark.asyncio
    async def test_send_and_list(self, test_client, register_user):
        """A body `sender` is ignored; both parties see the message."""
        alice = await register_user("alice")
        bob = await register_user("bob")

        response = await test_client.post(
            "/messages",
            json={"receiver": bob["id"], "content": "hi bob", "sender": bob["id"]},
            headers=_auth(alice),
        )
        assert response.status_code == 201
        sent = response.json()
        assert sent["sender"] == alice["id"]
        assert sent["receiver"] == bob["id"]
        assert "sentAt" in sent

        for user in (alice, bob):
            inbox = (await test_client.get("/messages", headers=_auth(user))).json()
            assert [m["id"] for m in inbox] == [sent["id"]]

    @pytest.mark.asyncio
    async def test_unknown_receiver_is_404(self, test_client, register_user):
        alice = await register_user("alice")
        response = await test_client.post(
            "/messages",
            json={"receiver": str(uuid.uuid4()), "content": "hello?"},
            headers=_auth(alice),
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Receiver not found"}

    @pytest.mark.asyncio
    async def test_list_requires_token(self, test_client):
        response = await test_client.get("/messages")
        assert response.status_code == 401
