"""Tests for the deck and card HTTP endpoints."""

from collections.abc import Callable

from fastapi import status
from fastapi.testclient import TestClient

from services.revalidation import PathRevalidator


def _create_deck(client: TestClient, name: str = "Spanish", description: str | None = None) -> dict:
    response = client.post("/decks", json={"name": name, "description": description})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def _create_card(client: TestClient, deck_id: int, front: str = "hola", back: str = "hello") -> dict:
    response = client.post(f"/decks/{deck_id}/cards", json={"front": front, "back": back})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestDeckEndpoints:
    def test_create_deck(self, client: TestClient, revalidator: PathRevalidator) -> None:
        deck = _create_deck(client)

        assert deck["user_id"] == "user_a"
        assert deck["name"] == "Spanish"
        assert deck["description"] is None
        assert deck["created_at"] == deck["updated_at"]
        assert revalidator.paths == ["/decks"]

    def test_create_deck_with_empty_name(self, client: TestClient) -> None:
        response = client.post("/decks", json={"name": "", "description": "x"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "validation_failed"
        assert body["errors"] == [{"field": "name", "message": "Name is required"}]

    def test_get_deck_of_other_user(self, client: TestClient, as_user: Callable[[str | None], None]) -> None:
        deck = _create_deck(client)

        as_user("user_b")
        response = client.get(f"/decks/{deck['id']}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "detail": "Deck not found or unauthorized",
            "code": "not_found_or_unauthorized",
        }

    def test_list_decks(self, client: TestClient, as_user: Callable[[str | None], None]) -> None:
        _create_deck(client, name="Spanish")
        _create_deck(client, name="German")
        as_user("user_b")
        _create_deck(client, name="French")
        as_user("user_a")

        response = client.get("/decks")

        assert response.status_code == status.HTTP_200_OK
        assert [deck["name"] for deck in response.json()] == ["Spanish", "German"]

    def test_update_deck(self, client: TestClient, revalidator: PathRevalidator) -> None:
        deck = _create_deck(client)

        response = client.put(f"/decks/{deck['id']}", json={"name": "Spanish verbs", "description": "ar/er/ir"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Spanish verbs"
        assert response.json()["description"] == "ar/er/ir"
        assert revalidator.paths[-2:] == ["/decks", f"/decks/{deck['id']}"]

    def test_update_deck_without_description_keeps_it(self, client: TestClient) -> None:
        deck = _create_deck(client, description="keep me")

        response = client.put(f"/decks/{deck['id']}", json={"name": "Renamed"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Renamed"
        assert response.json()["description"] == "keep me"

    def test_update_deck_of_other_user(self, client: TestClient, as_user: Callable[[str | None], None]) -> None:
        deck = _create_deck(client)

        as_user("user_b")
        response = client.put(f"/decks/{deck['id']}", json={"name": "Mine now"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_deck_removes_cards(self, client: TestClient) -> None:
        deck = _create_deck(client)
        card = _create_card(client, deck["id"])

        response = client.delete(f"/decks/{deck['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/decks/{deck['id']}").status_code == status.HTTP_404_NOT_FOUND
        assert client.get(f"/cards/{card['id']}").status_code == status.HTTP_404_NOT_FOUND

    def test_missing_identity_is_unauthenticated(
        self, client: TestClient, as_user: Callable[[str | None], None]
    ) -> None:
        as_user(None)

        response = client.get("/decks")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["code"] == "unauthenticated"


class TestCardEndpoints:
    def test_create_and_get_card(self, client: TestClient, revalidator: PathRevalidator) -> None:
        deck = _create_deck(client)

        card = _create_card(client, deck["id"])
        response = client.get(f"/cards/{card['id']}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert (body["deck_id"], body["front"], body["back"]) == (deck["id"], "hola", "hello")
        assert revalidator.paths[-1] == f"/decks/{deck['id']}"

    def test_create_card_in_missing_deck(self, client: TestClient) -> None:
        response = client.post("/decks/999/cards", json={"front": "x", "back": "y"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Deck not found or unauthorized"

    def test_create_card_with_empty_back(self, client: TestClient) -> None:
        deck = _create_deck(client)

        response = client.post(f"/decks/{deck['id']}/cards", json={"front": "x", "back": ""})

        assert response.status_code == 422
        assert response.json()["errors"] == [{"field": "back", "message": "Back of card is required"}]

    def test_list_cards(self, client: TestClient, as_user: Callable[[str | None], None]) -> None:
        deck = _create_deck(client)
        _create_card(client, deck["id"], front="uno")
        _create_card(client, deck["id"], front="dos")

        response = client.get(f"/decks/{deck['id']}/cards")
        assert [card["front"] for card in response.json()] == ["uno", "dos"]

        as_user("user_b")
        assert client.get(f"/decks/{deck['id']}/cards").status_code == status.HTTP_404_NOT_FOUND

    def test_update_card(self, client: TestClient, as_user: Callable[[str | None], None]) -> None:
        deck = _create_deck(client)
        card = _create_card(client, deck["id"])

        response = client.put(f"/cards/{card['id']}", json={"front": "adiós", "back": "goodbye"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["front"] == "adiós"

        as_user("user_b")
        response = client.put(f"/cards/{card['id']}", json={"front": "pwned", "back": "pwned"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

        as_user("user_a")
        assert client.get(f"/cards/{card['id']}").json()["front"] == "adiós"

    def test_delete_card(self, client: TestClient, as_user: Callable[[str | None], None]) -> None:
        deck = _create_deck(client)
        card = _create_card(client, deck["id"])

        as_user("user_b")
        assert client.delete(f"/cards/{card['id']}").status_code == status.HTTP_404_NOT_FOUND

        as_user("user_a")
        assert client.delete(f"/cards/{card['id']}").status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/cards/{card['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_status(client: TestClient) -> None:
    response = client.get("/status")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}
