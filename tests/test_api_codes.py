"""Tests for deck code API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from deckcodes.config import settings
from deckcodes.main import app


@pytest.fixture
async def client():
    """Provide an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestEncodeEndpoint:
    async def test_encode_cards(self, client: AsyncClient, regression_deck, regression_code) -> None:
        """Encodes a card list into the recorded code."""
        cards = [{"code": e.card.code, "count": e.count} for e in regression_deck]

        response = await client.post("/codes/encode", json={"cards": cards})

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "success"
        assert data["data"]["code"] == regression_code
        assert data["data"]["version"] == 1
        assert data["data"]["total_cards"] == 40

    async def test_encode_decklist(self, client: AsyncClient) -> None:
        """Encodes decklist text."""
        response = await client.post(
            "/codes/encode",
            json={"decklist": "3:02DE003\n2:01DE003\n1:01DE002"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["code"] == "CEAQCAQAAMAQCAIAAMAQCAIAAI"

    async def test_encode_reports_version(self, client: AsyncClient) -> None:
        """Version reflects the newest faction in the deck."""
        response = await client.post(
            "/codes/encode",
            json={"cards": [{"code": "01DE002", "count": 3}, {"code": "05BC001", "count": 1}]},
        )

        assert response.json()["data"]["version"] == 4

    async def test_encode_invalid_card(self, client: AsyncClient) -> None:
        """Unknown faction is a classified 400."""
        response = await client.post(
            "/codes/encode",
            json={"cards": [{"code": "01YY002", "count": 1}]},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_card"

    async def test_encode_zero_count(self, client: AsyncClient) -> None:
        """Zero count is a classified 400."""
        response = await client.post(
            "/codes/encode",
            json={"cards": [{"code": "01DE002", "count": 0}]},
        )

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_card"

    async def test_encode_requires_exactly_one_source(self, client: AsyncClient) -> None:
        """Both or neither of cards/decklist is rejected."""
        neither = await client.post("/codes/encode", json={})
        both = await client.post(
            "/codes/encode",
            json={"cards": [], "decklist": "1:01DE002"},
        )

        assert neither.status_code == 422
        assert both.status_code == 422

    async def test_encode_entry_limit(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Decks above the configured entry limit are refused."""
        monkeypatch.setattr(settings, "max_deck_entries", 1)

        response = await client.post(
            "/codes/encode",
            json={"decklist": "1:01DE002\n1:01DE003"},
        )

        assert response.status_code == 413


class TestDecodeEndpoint:
    async def test_decode(self, client: AsyncClient, regression_code) -> None:
        """Decodes the recorded code into its cards."""
        response = await client.post("/codes/decode", json={"code": regression_code})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["version"] == 1
        assert data["total_cards"] == 40
        assert len(data["cards"]) == 14
        assert {"code": "01FR004", "count": 2} in data["cards"]

    async def test_decode_strips_whitespace(self, client: AsyncClient, regression_code) -> None:
        """Surrounding whitespace from copy/paste is ignored."""
        response = await client.post("/codes/decode", json={"code": f"  {regression_code}\n"})

        assert response.status_code == 200

    async def test_decode_garbage(self, client: AsyncClient) -> None:
        """Non base-32 input is a classified decode failure."""
        response = await client.post("/codes/decode", json={"code": "I'm no card code!"})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "decode"

    async def test_decode_truncated(self, client: AsyncClient) -> None:
        """Truncated input is a classified varint failure."""
        response = await client.post("/codes/decode", json={"code": "CE"})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "varint_decode"

    async def test_decode_newer_version(self, client: AsyncClient) -> None:
        """Codes from a newer protocol ask the caller to update."""
        # Header 0x1F: format 1, version 15
        response = await client.post("/codes/decode", json={"code": "D4AAAAA"})

        assert response.status_code == 400
        failure = response.json()["failure"]
        assert failure["kind"] == "version"
        assert "newer version" in failure["suggestion"]

    async def test_decode_length_limit(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Codes above the configured length limit are refused."""
        monkeypatch.setattr(settings, "max_code_length", 4)

        response = await client.post("/codes/decode", json={"code": "CEAAAAA"})

        assert response.status_code == 413


class TestFactionsEndpoint:
    async def test_lists_factions(self, client: AsyncClient) -> None:
        """Lists the faction table with versions."""
        response = await client.get("/codes/factions")

        assert response.status_code == 200
        data = response.json()
        assert data["max_version"] == 5
        assert {"code": "SH", "id": 7, "version": 3} in data["factions"]
        assert len(data["factions"]) == 11
