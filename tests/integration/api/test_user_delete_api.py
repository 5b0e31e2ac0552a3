"""Integration tests for the cascading user delete."""

import asyncio
from typing import Any

import pytest
from httpx import AsyncClient

from core.exceptions import PostNotFoundError
from infrastructure.memory.database import InMemoryDatabase

USERS = "/api/v1/users"


async def _create_user(client: AsyncClient, name: str) -> dict[str, Any]:
    response = await client.post(
        USERS,
        json={"first_name": name, "last_name": "Tester", "email": f"{name.lower()}@example.com"},
    )
    return response.json()["data"]  # type: ignore[no-any-return]


async def _subscribe(client: AsyncClient, follower_id: str, target_id: str) -> None:
    response = await client.post(
        f"{USERS}/{target_id}/subscribe-to", json={"user_id": follower_id}
    )
    assert response.status_code == 200


async def _populate(client: AsyncClient, user_id: str, posts: int = 2) -> None:
    await client.post(
        "/api/v1/profiles",
        json={
            "user_id": user_id,
            "member_type_id": "basic",
            "avatar": "a.png",
            "sex": "male",
            "birthday": 19700101,
            "country": "NL",
            "street": "Main",
            "city": "Amsterdam",
        },
    )
    for n in range(posts):
        await client.post(
            "/api/v1/posts", json={"user_id": user_id, "title": f"post {n}", "content": "c"}
        )


class TestUserDeleteCascade:
    """Deleting a user removes or rewrites everything that references it."""

    @pytest.mark.asyncio
    async def test_delete_removes_dependents(self, client: AsyncClient, database: InMemoryDatabase):
        u1 = await _create_user(client, "Ada")
        u2 = await _create_user(client, "Grace")
        await _populate(client, u1["id"])
        await _subscribe(client, u2["id"], u1["id"])

        response = await client.delete(f"{USERS}/{u1['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == u1["id"]
        assert (await client.get("/api/v1/profiles")).json()["data"] == []
        assert (await client.get("/api/v1/posts")).json()["data"] == []
        survivor = (await client.get(f"{USERS}/{u2['id']}")).json()["data"]
        assert survivor["subscribed_to_user_ids"] == []
        assert database.stats() == {"users": 1, "profiles": 0, "posts": 0, "member_types": 2}

    @pytest.mark.asyncio
    async def test_delete_keeps_other_users_data(self, client: AsyncClient):
        u1 = await _create_user(client, "Ada")
        u2 = await _create_user(client, "Grace")
        u3 = await _create_user(client, "Linus")
        await _populate(client, u1["id"], posts=1)
        await _populate(client, u2["id"], posts=1)
        await _subscribe(client, u3["id"], u1["id"])
        await _subscribe(client, u3["id"], u2["id"])

        await client.delete(f"{USERS}/{u1['id']}")

        posts = (await client.get("/api/v1/posts")).json()["data"]
        assert [p["user_id"] for p in posts] == [u2["id"]]
        follower = (await client.get(f"{USERS}/{u3['id']}")).json()["data"]
        assert follower["subscribed_to_user_ids"] == [u2["id"]]

    @pytest.mark.asyncio
    async def test_concurrent_deletes_of_mutual_followers(
        self, client: AsyncClient, database: InMemoryDatabase
    ):
        """Two users following each other can be deleted at the same time."""
        u1 = await _create_user(client, "Ada")
        u2 = await _create_user(client, "Grace")
        await _subscribe(client, u1["id"], u2["id"])
        await _subscribe(client, u2["id"], u1["id"])

        responses = await asyncio.gather(
            client.delete(f"{USERS}/{u1['id']}"),
            client.delete(f"{USERS}/{u2['id']}"),
        )

        assert [r.status_code for r in responses] == [200, 200]
        assert database.stats()["users"] == 0

    @pytest.mark.asyncio
    async def test_failed_step_reverts_everything(
        self,
        client: AsyncClient,
        database: InMemoryDatabase,
        monkeypatch: pytest.MonkeyPatch,
    ):
        u1 = await _create_user(client, "Ada")
        u2 = await _create_user(client, "Grace")
        await _populate(client, u1["id"])
        await _subscribe(client, u2["id"], u1["id"])
        before = database.stats()

        async def failing_delete(post_id: Any) -> Any:
            raise PostNotFoundError(str(post_id))

        monkeypatch.setattr(database.posts, "delete", failing_delete)

        response = await client.delete(f"{USERS}/{u1['id']}")

        assert response.status_code == 412
        body = response.json()
        assert body["error_code"] == "CASCADE_FAILED"
        assert body["details"]["step"] == "posts"
        assert len(body["details"]["failed_post_ids"]) == 2

        assert database.stats() == before
        assert (await client.get(f"{USERS}/{u1['id']}")).status_code == 200
        follower = (await client.get(f"{USERS}/{u2['id']}")).json()["data"]
        assert follower["subscribed_to_user_ids"] == [u1["id"]]
