"""
Deck code API endpoints.

Provides endpoints for encoding decks into deck codes, decoding deck codes
back into card lists, and listing the faction table.
"""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from deckcodes.config import settings
from deckcodes.models.card import CardCount
from deckcodes.models.deck import Deck
from deckcodes.models.factions import MAX_KNOWN_VERSION, known_factions
from deckcodes.models.failure import ApiResponse
from deckcodes.parsers.decklist import parse_decklist
from deckcodes.services.deck_codec import decode, encode, peek_version

router = APIRouter(prefix="/codes", tags=["codes"])


class CardEntry(BaseModel):
    """A card code with its count."""

    code: str = Field(..., description="Seven-character card code, e.g. 01SI015")
    count: int = Field(..., description="Number of copies")


class EncodeRequest(BaseModel):
    """Request body for encoding. Provide exactly one of cards or decklist."""

    cards: list[CardEntry] | None = None
    decklist: str | None = Field(
        default=None,
        description="One 'count:code' entry per line",
    )


class EncodeResult(BaseModel):
    """Encoded deck code."""

    code: str
    version: int
    total_cards: int


class DecodeRequest(BaseModel):
    """Request body for decoding."""

    code: str


class DecodeResult(BaseModel):
    """Cards recovered from a deck code."""

    cards: list[CardEntry]
    version: int
    total_cards: int


class FactionInfo(BaseModel):
    """One row of the faction table."""

    code: str
    id: int
    version: int


class FactionListResponse(BaseModel):
    """The faction table."""

    factions: list[FactionInfo]
    max_version: int


def _request_to_deck(request: EncodeRequest) -> Deck:
    if (request.cards is None) == (request.decklist is None):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Provide exactly one of 'cards' or 'decklist'.",
        )

    if request.decklist is not None:
        deck = parse_decklist(request.decklist)
    else:
        deck = Deck.from_entries(
            CardCount.from_data(entry.code, entry.count) for entry in request.cards or []
        )

    if len(deck) > settings.max_deck_entries:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Deck has {len(deck)} entries; limit is {settings.max_deck_entries}.",
        )

    return deck


@router.post("/encode", response_model=ApiResponse[EncodeResult])
async def encode_deck(request: EncodeRequest) -> ApiResponse[EncodeResult]:
    """
    Encode a deck into a deck code.

    Card order in the request does not affect the code.
    """
    deck = _request_to_deck(request)
    code = encode(deck)

    return ApiResponse.success(
        EncodeResult(code=code, version=deck.min_version(), total_cards=deck.total_cards())
    )


@router.post("/decode", response_model=ApiResponse[DecodeResult])
async def decode_deck(request: DecodeRequest) -> ApiResponse[DecodeResult]:
    """
    Decode a deck code into its cards.

    Returns 400 with a classified failure if the code is malformed or
    was written by a newer protocol version.
    """
    code = request.code.strip()
    if len(code) > settings.max_code_length:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Deck code longer than {settings.max_code_length} characters.",
        )

    deck = decode(code)

    return ApiResponse.success(
        DecodeResult(
            cards=[CardEntry(code=entry.card.code, count=entry.count) for entry in deck],
            version=peek_version(code),
            total_cards=deck.total_cards(),
        )
    )


@router.get("/factions", response_model=FactionListResponse)
async def list_factions() -> FactionListResponse:
    """List every known faction with the protocol version that introduced it."""
    return FactionListResponse(
        factions=[
            FactionInfo(code=code, id=faction, version=version)
            for code, faction, version in known_factions()
        ],
        max_version=MAX_KNOWN_VERSION,
    )
