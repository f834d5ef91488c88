from deckcodes.models.card import CardCount, CardIdentifier
from deckcodes.models.deck import Deck
from deckcodes.models.factions import (
    FORMAT,
    INITIAL_VERSION,
    MAX_KNOWN_VERSION,
    faction_code,
    faction_id,
    faction_version,
    known_factions,
)
from deckcodes.models.failure import (
    ApiResponse,
    DeckCodeError,
    DeckCodeErrorKind,
    DecodeError,
    FailureDetail,
    InvalidCardError,
    InvalidDeckError,
    OutcomeType,
    VarintDecodeError,
    VersionError,
)

__all__ = [
    "ApiResponse",
    "CardCount",
    "CardIdentifier",
    "Deck",
    "DeckCodeError",
    "DeckCodeErrorKind",
    "DecodeError",
    "FORMAT",
    "FailureDetail",
    "INITIAL_VERSION",
    "InvalidCardError",
    "InvalidDeckError",
    "MAX_KNOWN_VERSION",
    "OutcomeType",
    "VarintDecodeError",
    "VersionError",
    "faction_code",
    "faction_id",
    "faction_version",
    "known_factions",
]
