"""Integration tests for Profiles API."""

from datetime import date, timedelta

import pytest
from httpx import AsyncClient

JOHN = {"firstName": "John", "lastName": "Doe", "dateOfBirth": "1990-01-01"}
JANE = {"firstName": "Jane", "lastName": "Smith", "dateOfBirth": "1985-03-22"}


class TestProfilesAPI:
    """Integration tests for Profile CRUD."""

    @pytest.mark.asyncio
    async def test_create_profile(self, client: AsyncClient):
        """Test POST /api/v1/profiles."""
        response = await client.post("/api/v1/profiles", json=JOHN)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Profile created successfully"
        data = body["data"]
        assert isinstance(data["id"], int)
        assert data["first_name"] == "John"
        assert data["last_name"] == "Doe"
        assert data["date_of_birth"] == "1990-01-01"
        assert data["created_at"]
        assert data["updated_at"] >= data["created_at"]

    @pytest.mark.asyncio
    async def test_create_trims_names(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/profiles",
            json={"firstName": "  John  ", "lastName": "  Doe  ", "dateOfBirth": "1990-01-01"},
        )

        data = response.json()["data"]
        assert (data["first_name"], data["last_name"]) == ("John", "Doe")

    @pytest.mark.asyncio
    async def test_create_then_get_round_trip(self, client: AsyncClient):
        created = (await client.post("/api/v1/profiles", json=JANE)).json()["data"]

        response = await client.get(f"/api/v1/profiles/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": created}

    @pytest.mark.asyncio
    async def test_list_profiles_newest_first(self, client: AsyncClient):
        """Test GET /api/v1/profiles."""
        first = (await client.post("/api/v1/profiles", json=JOHN)).json()["data"]
        second = (await client.post("/api/v1/profiles", json=JANE)).json()["data"]

        response = await client.get("/api/v1/profiles")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 2
        assert [p["id"] for p in body["data"]] == [second["id"], first["id"]]

    @pytest.mark.asyncio
    async def test_list_profiles_empty(self, client: AsyncClient):
        response = await client.get("/api/v1/profiles")

        assert response.json() == {"success": True, "data": [], "count": 0}

    @pytest.mark.asyncio
    async def test_get_missing_profile(self, client: AsyncClient):
        response = await client.get("/api/v1/profiles/99999")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Profile not found"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["-1", "invalid"])
    async def test_get_invalid_id(self, client: AsyncClient, raw_id: str):
        response = await client.get(f"/api/v1/profiles/{raw_id}")

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid profile ID"}

    @pytest.mark.asyncio
    async def test_create_reports_all_failures(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/profiles",
            json={"firstName": "", "lastName": "", "dateOfBirth": "invalid-date"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Validation failed",
            "details": [
                "firstName is required and must be a non-empty string",
                "lastName is required and must be a non-empty string",
                "dateOfBirth must be a valid date",
            ],
        }

    @pytest.mark.asyncio
    async def test_failed_create_writes_nothing(self, client: AsyncClient):
        future = (date.today() + timedelta(days=365)).isoformat()

        response = await client.post(
            "/api/v1/profiles",
            json={"firstName": "John", "lastName": "Doe", "dateOfBirth": future},
        )

        assert response.status_code == 400
        assert response.json()["details"] == ["dateOfBirth cannot be in the future"]
        assert (await client.get("/api/v1/profiles")).json()["count"] == 0

    @pytest.mark.asyncio
    async def test_update_profile(self, client: AsyncClient):
        """Test PUT /api/v1/profiles/{id}."""
        created = (await client.post("/api/v1/profiles", json=JOHN)).json()["data"]

        response = await client.put(
            f"/api/v1/profiles/{created['id']}",
            json={"firstName": " Johnny ", "lastName": "Doe-Smith", "dateOfBirth": "1991-06-30"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Profile updated successfully"
        data = body["data"]
        assert data["id"] == created["id"]
        assert data["first_name"] == "Johnny"
        assert data["last_name"] == "Doe-Smith"
        assert data["date_of_birth"] == "1991-06-30"
        assert data["created_at"] == created["created_at"]
        assert data["updated_at"] >= created["updated_at"]

        fetched = (await client.get(f"/api/v1/profiles/{created['id']}")).json()["data"]
        assert fetched == data

    @pytest.mark.asyncio
    async def test_update_missing_profile(self, client: AsyncClient):
        response = await client.put("/api/v1/profiles/424242", json=JOHN)

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Profile not found"}

    @pytest.mark.asyncio
    async def test_update_validation_failure_keeps_row(self, client: AsyncClient):
        created = (await client.post("/api/v1/profiles", json=JOHN)).json()["data"]

        response = await client.put(
            f"/api/v1/profiles/{created['id']}",
            json={"firstName": "Johnny", "lastName": "Doe"},
        )

        assert response.status_code == 400
        assert response.json()["details"] == ["dateOfBirth is required"]
        fetched = (await client.get(f"/api/v1/profiles/{created['id']}")).json()["data"]
        assert fetched["first_name"] == "John"

    @pytest.mark.asyncio
    async def test_delete_is_not_exposed(self, client: AsyncClient):
        created = (await client.post("/api/v1/profiles", json=JOHN)).json()["data"]

        response = await client.delete(f"/api/v1/profiles/{created['id']}")

        assert response.status_code == 405
        assert response.json()["success"] is False
