from fastapi.testclient import TestClient

from flashcards.services.card_service import CardService


class TestListCards:
    """GET / and /cards"""

    def test_lists_cards_and_tags(self, auth_client: TestClient, card):
        for path in ("/", "/cards"):
            response = auth_client.get(path)
            assert response.status_code == 200
            assert "Capital of France" in response.text
            assert "bookmark" in response.text

    def test_show(self, auth_client: TestClient, card):
        response = auth_client.get("/show")
        assert response.status_code == 200
        assert "Paris" in response.text


class TestFilterCards:
    """GET /filter_cards/{filter_name}"""

    def test_numeric_filter(self, auth_client: TestClient, db, card):
        CardService.insert_card(db, card_type=2, front="list comprehension", back="[x for x in y]")

        response = auth_client.get("/filter_cards/2")

        assert response.status_code == 200
        assert "list comprehension" in response.text
        assert "Capital of France" not in response.text

    def test_named_filter(self, auth_client: TestClient, card):
        response = auth_client.get("/filter_cards/unknown")
        assert response.status_code == 200
        assert "Capital of France" in response.text

    def test_injection_attempt_is_rejected(self, auth_client: TestClient, db, card):
        response = auth_client.get("/filter_cards/1 OR 1=1")

        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"
        assert len(CardService.fetch_all(db)) == 1

    def test_number_too_large_for_sqlite_is_rejected(self, auth_client: TestClient, card):
        response = auth_client.get("/filter_cards/99999999999999999999")

        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"


class TestAddCard:
    """POST /add"""

    def test_add_card(self, auth_client: TestClient, db):
        response = auth_client.post(
            "/add",
            data={"type": "2", "front": "  What is a tuple?  ", "back": "Immutable sequence"},
        )

        assert response.status_code == 200
        assert "New card was successfully added." in response.text

        cards = CardService.fetch_all(db)
        assert len(cards) == 1
        assert (cards[0].type, cards[0].front, cards[0].known) == (2, "What is a tuple?", False)

    def test_notice_is_shown_once(self, auth_client: TestClient):
        auth_client.post("/add", data={"type": "1", "front": "a", "back": "b"})

        response = auth_client.get("/cards")
        assert "New card was successfully added." not in response.text

    def test_missing_field_is_rejected(self, auth_client: TestClient, db):
        response = auth_client.post("/add", data={"type": "1", "front": "   ", "back": "b"})

        assert response.status_code == 400
        assert CardService.fetch_all(db) == []

    def test_non_numeric_type_is_rejected(self, auth_client: TestClient, db):
        response = auth_client.post("/add", data={"type": "general", "front": "a", "back": "b"})
        assert response.status_code == 400
        assert CardService.fetch_all(db) == []


class TestEditCard:
    """GET /edit/{card_id} and POST /edit-card"""

    def test_edit_form(self, auth_client: TestClient, card):
        response = auth_client.get(f"/edit/{card.id}")
        assert response.status_code == 200
        assert 'name="card_id"' in response.text
        assert "Paris" in response.text

    def test_edit_form_missing_card(self, auth_client: TestClient):
        response = auth_client.get("/edit/999", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/show"

    def test_edit_form_id_too_large_for_sqlite(self, auth_client: TestClient):
        response = auth_client.get("/edit/99999999999999999999")

        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"

    def test_save(self, auth_client: TestClient, db, card):
        response = auth_client.post(
            "/edit-card",
            data={"card_id": str(card.id), "type": "3", "front": "Capital of Italy", "back": "Rome", "known": "1"},
        )

        assert response.status_code == 200
        assert "Card saved." in response.text
        db.expire_all()
        saved = CardService.fetch_by_id(db, card.id)
        assert (saved.type, saved.front, saved.back, saved.known) == (3, "Capital of Italy", "Rome", True)

    def test_known_defaults_to_false(self, auth_client: TestClient, db, card):
        CardService.set_known(db, card.id, True)

        auth_client.post(
            "/edit-card",
            data={"card_id": str(card.id), "type": "1", "front": "f", "back": "b", "known": "yes"},
        )

        db.expire_all()
        assert CardService.fetch_by_id(db, card.id).known is False

    def test_save_id_too_large_for_sqlite(self, auth_client: TestClient, db, card):
        response = auth_client.post(
            "/edit-card",
            data={"card_id": "99999999999999999999", "type": "1", "front": "f", "back": "b"},
        )

        assert response.status_code == 400
        db.expire_all()
        assert CardService.fetch_by_id(db, card.id).front == "Capital of France"

    def test_save_missing_card(self, auth_client: TestClient):
        response = auth_client.post(
            "/edit-card",
            data={"card_id": "999", "type": "1", "front": "f", "back": "b"},
        )
        assert response.status_code == 200
        assert "Card not found." in response.text


class TestDeleteCard:
    """GET /delete/{card_id}"""

    def test_delete(self, auth_client: TestClient, db, card):
        response = auth_client.get(f"/delete/{card.id}")
        assert response.status_code == 200
        assert "Card deleted." in response.text
        assert CardService.fetch_all(db) == []

    def test_delete_missing_is_not_an_error(self, auth_client: TestClient, db, card):
        response = auth_client.get("/delete/999", follow_redirects=False)
        assert response.status_code == 303
        assert len(CardService.fetch_all(db)) == 1


class TestBookmark:
    """GET /bookmark/{card_type}/{card_id}"""

    def test_bookmark_reassigns_type(self, auth_client: TestClient, db, card):
        response = auth_client.get(f"/bookmark/3/{card.id}", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/memorize/3"
        db.expire_all()
        assert CardService.fetch_by_id(db, card.id).type == 3

    def test_type_too_large_for_sqlite(self, auth_client: TestClient, db, card):
        response = auth_client.get(f"/bookmark/99999999999999999999/{card.id}")

        assert response.status_code == 400
        db.expire_all()
        assert CardService.fetch_by_id(db, card.id).type == 1
