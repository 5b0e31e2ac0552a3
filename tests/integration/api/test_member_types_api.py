"""Integration tests for Member Types API."""

import pytest
from httpx import AsyncClient

MEMBER_TYPES = "/api/v1/member-types"


class TestMemberTypesAPI:
    """Integration tests for the fixed member types."""

    @pytest.mark.asyncio
    async def test_list_seeded_member_types(self, client: AsyncClient):
        response = await client.get(MEMBER_TYPES)

        assert response.status_code == 200
        assert response.json()["data"] == [
            {"id": "basic", "discount": 0, "month_posts_limit": 20},
            {"id": "business", "discount": 5, "month_posts_limit": 100},
        ]

    @pytest.mark.asyncio
    async def test_get_member_type(self, client: AsyncClient):
        response = await client.get(f"{MEMBER_TYPES}/business")

        assert response.status_code == 200
        assert response.json()["data"]["month_posts_limit"] == 100

    @pytest.mark.asyncio
    async def test_get_unknown_member_type(self, client: AsyncClient):
        response = await client.get(f"{MEMBER_TYPES}/platinum")

        assert response.status_code == 404
        assert response.json()["error_code"] == "MEMBER_TYPE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update_member_type(self, client: AsyncClient):
        response = await client.patch(f"{MEMBER_TYPES}/basic", json={"discount": 2.5})

        assert response.status_code == 200
        assert response.json()["data"] == {
            "id": "basic",
            "discount": 2.5,
            "month_posts_limit": 20,
        }

    @pytest.mark.asyncio
    async def test_update_rejects_negative_limit(self, client: AsyncClient):
        response = await client.patch(f"{MEMBER_TYPES}/basic", json={"month_posts_limit": -1})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_unknown_member_type(self, client: AsyncClient):
        response = await client.patch(f"{MEMBER_TYPES}/platinum", json={"discount": 1})

        assert response.status_code == 404
