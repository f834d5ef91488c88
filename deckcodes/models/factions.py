"""
Faction code table.

Maps the two-letter faction codes found in card codes to the small integer
ids written on the wire, and each faction id to the lowest protocol version
that can represent it.

New factions always receive the next protocol version. Existing entries are
never renumbered or lowered.
"""

from types import MappingProxyType

# Header high nibble
FORMAT = 1

# Version written for an empty deck
INITIAL_VERSION = 1

# Highest version this library can decode
MAX_KNOWN_VERSION = 5

FACTION_IDS: MappingProxyType[str, int] = MappingProxyType(
    {
        "DE": 0,
        "FR": 1,
        "IO": 2,
        "NX": 3,
        "PZ": 4,
        "SI": 5,
        "BW": 6,
        "SH": 7,
        "MT": 9,
        "BC": 10,
        "RU": 12,
    }
)

FACTION_CODES: MappingProxyType[int, str] = MappingProxyType(
    {faction_id: code for code, faction_id in FACTION_IDS.items()}
)

FACTION_VERSIONS: MappingProxyType[int, int] = MappingProxyType(
    {
        0: 1,
        1: 1,
        2: 1,
        3: 1,
        4: 1,
        5: 1,
        6: 2,
        9: 2,
        7: 3,
        10: 4,
        12: 5,
    }
)


def faction_id(code: str) -> int | None:
    """Return the wire id for a faction code, or None if unknown."""
    return FACTION_IDS.get(code)


def faction_code(faction: int) -> str | None:
    """Return the faction code for a wire id, or None if unknown."""
    return FACTION_CODES.get(faction)


def faction_version(faction: int) -> int:
    """
    Lowest protocol version able to represent a faction.

    Unknown ids map to MAX_KNOWN_VERSION so a deck containing them is never
    stamped with a version an older decoder claims to understand.
    """
    return FACTION_VERSIONS.get(faction, MAX_KNOWN_VERSION)


def known_factions() -> list[tuple[str, int, int]]:
    """All factions as (code, id, version), ordered by id."""
    return [
        (code, faction, FACTION_VERSIONS[faction])
        for faction, code in sorted(FACTION_CODES.items())
    ]
