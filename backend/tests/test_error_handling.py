from fastapi.testclient import TestClient
from sqlalchemy import text


class TestStoreErrors:
    """Store failures reaching the HTTP layer"""

    def test_closed_store_is_503(self, auth_client: TestClient, store):
        store.current.close()

        response = auth_client.get("/cards", headers={"Accept": "application/json"})

        assert response.status_code == 503
        assert response.json()["type"] == "StoreUnavailableError"

    def test_failed_statement_is_generic_500(self, auth_client: TestClient, store):
        with store.current.engine.begin() as conn:
            conn.execute(text("DROP TABLE cards"))

        response = auth_client.get("/cards")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestValidationErrors:
    def test_non_integer_path_parameter_is_400(self, auth_client: TestClient):
        response = auth_client.get("/edit/abc")

        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"

    def test_unknown_filter_is_400(self, auth_client: TestClient):
        response = auth_client.get("/filter_cards/nonsense")

        assert response.status_code == 400
        assert response.json() == {"detail": "Unknown card filter: 'nonsense'", "type": "ValidationError"}
