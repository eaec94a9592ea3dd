"""Integration tests for account endpoints"""

import json
import pytest
from httpx import AsyncClient


async def register(client: AsyncClient, api: str, **overrides):
    payload = {"name": "Budi", "username": "budi", "password": "secret1"}
    payload.update(overrides)
    return await client.post(f"{api}/register", json=payload)


class TestAccountsAPIIntegration:

    @pytest.mark.asyncio
    async def test_register(self, client: AsyncClient, api, tmp_path):
        """POST /register stores a bcrypt hash and never returns it"""
        # Act
        response = await register(client, api)

        # Assert
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["id"].startswith("USER_")
        assert user["email"] == "budi@panel.com"
        assert user["role"] == "member"
        assert "password" not in user

        stored = json.loads((tmp_path / "dataLogin.json").read_text())["users"][0]
        assert stored["password"].startswith("$2b$")

    @pytest.mark.asyncio
    async def test_register_short_password(self, client: AsyncClient, api):
        response = await register(client, api, password="123")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_register_duplicate(self, client: AsyncClient, api):
        await register(client, api)

        response = await register(client, api, email="other@mail.com")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "USER_EXISTS"

    @pytest.mark.asyncio
    async def test_login_by_username_and_email(self, client: AsyncClient, api):
        await register(client, api, email="budi@mail.com")

        by_username = await client.post(f"{api}/login", json={"username": "budi", "password": "secret1"})
        by_email = await client.post(f"{api}/login", json={"email": "budi@mail.com", "password": "secret1"})

        assert by_username.status_code == 200
        assert by_email.status_code == 200
        assert by_email.json()["user"]["lastLogin"] is not None

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client: AsyncClient, api):
        await register(client, api)

        response = await client.post(f"{api}/login", json={"username": "budi", "password": "wrong!"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"

    @pytest.mark.asyncio
    async def test_login_without_identifier(self, client: AsyncClient, api):
        response = await client.post(f"{api}/login", json={"password": "secret1"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_get_user(self, client: AsyncClient, api):
        user_id = (await register(client, api)).json()["user"]["id"]

        found = await client.get(f"{api}/user/{user_id}")
        missing = await client.get(f"{api}/user/USER_0_missing")

        assert found.json()["user"]["username"] == "budi"
        assert missing.status_code == 404
        assert missing.json()["error"]["code"] == "USER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_users(self, client: AsyncClient, api):
        await register(client, api)
        await register(client, api, name="Siti", username="siti")

        users = (await client.get(f"{api}/users")).json()["users"]

        assert [u["username"] for u in users] == ["budi", "siti"]
        assert all("password" not in u for u in users)
