"""Integration tests for student routes."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from studentapi.api.app import create_app
from studentapi.config import Settings

MISSING_ID = "0123456789abcdef01234567"


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "students.db"


@pytest.fixture
def client(temp_db_path: Path):
    """Create a test client with temporary database."""
    app = create_app(Settings(database_url=f"sqlite:///{temp_db_path}"))
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def _create(client: TestClient, name: str = "Ann", code: str = "S001", active: bool = True):
    return client.post("/students", json={"name": name, "studentCode": code, "isActive": active})


@pytest.mark.integration
class TestStudentCrudFullFlow:
    """Integration test for full CRUD flow."""

    def test_student_crud_full_flow(self, client: TestClient) -> None:
        """Create -> Read -> Update -> Delete flow."""
        # 1. Create
        create_response = _create(client)
        assert create_response.status_code == 201
        student_id = create_response.json()["data"]["id"]

        # 2. Read
        get_response = client.get(f"/students/{student_id}")
        assert get_response.status_code == 200
        assert get_response.json()["data"] == {
            "id": student_id,
            "name": "Ann",
            "studentCode": "S001",
            "isActive": True,
        }

        # 3. Update
        update_response = client.put(
            f"/students/{student_id}",
            json={"name": "Annie", "isActive": False},
        )
        assert update_response.status_code == 200
        assert update_response.json()["data"]["name"] == "Annie"

        # Verify update persisted
        list_response = client.get("/students")
        assert list_response.json()["data"] == [
            {"id": student_id, "name": "Annie", "studentCode": "S001", "isActive": False}
        ]

        # 4. Delete
        delete_response = client.delete(f"/students/{student_id}")
        assert delete_response.status_code == 200
        assert delete_response.json()["success"] is True

        # Verify deleted
        assert client.get(f"/students/{student_id}").status_code == 404
        assert client.delete(f"/students/{student_id}").status_code == 404


@pytest.mark.integration
class TestStudentContract:
    """Behavioral guarantees of the student endpoints."""

    def test_create_example(self, client: TestClient) -> None:
        """POST with a valid body returns 201 and echoes the fields."""
        response = _create(client, "Ann", "S001", True)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Ann"
        assert data["studentCode"] == "S001"
        assert data["isActive"] is True

    def test_long_name_round_trip(self, client: TestClient) -> None:
        """A 300-character name is stored and returned in full."""
        created = _create(client, name="A" * 300)
        assert created.status_code == 201

        student_id = created.json()["data"]["id"]
        fetched = client.get(f"/students/{student_id}")

        assert fetched.json()["data"]["name"] == "A" * 300

    def test_duplicate_student_code_rejected(self, client: TestClient) -> None:
        """Second create with the same studentCode fails with 400."""
        assert _create(client, "Ann", "S001").status_code == 201

        response = _create(client, "Bob", "S001")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert len(client.get("/students").json()["data"]) == 1

    def test_update_never_changes_student_code(self, client: TestClient) -> None:
        """studentCode survives an update that tries to change it."""
        student_id = _create(client).json()["data"]["id"]

        client.put(
            f"/students/{student_id}",
            json={"name": "Annie", "isActive": True, "studentCode": "S999"},
        )

        assert client.get(f"/students/{student_id}").json()["data"]["studentCode"] == "S001"

    @pytest.mark.parametrize("is_active", ["true", 1])
    def test_is_active_must_be_boolean(self, client: TestClient, is_active: object) -> None:
        """Non-boolean isActive fails on create and update."""
        create = client.post(
            "/students", json={"name": "Ann", "studentCode": "S001", "isActive": is_active}
        )
        assert create.status_code == 400

        student_id = _create(client, code="S002").json()["data"]["id"]
        update = client.put(f"/students/{student_id}", json={"name": "Ann", "isActive": is_active})
        assert update.status_code == 400

    def test_get_unused_id_not_found(self, client: TestClient) -> None:
        """GET of a well-formed but unused ID is 404."""
        response = client.get(f"/students/{MISSING_ID}")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_get_malformed_id_is_server_error(self, client: TestClient) -> None:
        """GET of a malformed ID is a generic 500."""
        response = client.get("/students/abc")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Server error"}

    def test_delete_malformed_id_bad_request(self, client: TestClient) -> None:
        """DELETE of a malformed ID is 400."""
        response = client.delete("/students/not-a-valid-id")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid student ID format"

    def test_data_survives_restart(self, temp_db_path: Path) -> None:
        """Records persist across application instances."""
        settings = Settings(database_url=f"sqlite:///{temp_db_path}")
        with TestClient(create_app(settings)) as first:
            student_id = _create(first).json()["data"]["id"]

        with TestClient(create_app(settings)) as second:
            response = second.get(f"/students/{student_id}")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Ann"


@pytest.mark.integration
class TestInfo:
    """Tests for GET /info through the full app."""

    def test_info(self, client: TestClient) -> None:
        response = client.get("/info")

        assert response.status_code == 200
        assert response.json()["data"]["studentCode"] == "QE170101"


@pytest.mark.integration
class TestOpenAPIDocs:
    """Tests for the generated API docs."""

    def test_openapi_lists_student_paths(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()

        assert "/students" in schema["paths"]
        assert "/students/{student_id}" in schema["paths"]
        assert "/info" in schema["paths"]
        assert set(schema["paths"]["/students/{student_id}"]) == {"get", "put", "delete"}
