"""
Deck Code Failures — Closed Error Taxonomy and Response Envelope.

Every failure raised by the codec belongs to exactly one DeckCodeErrorKind:

- INVALID_CARD: malformed card code, unknown faction, or count below 1
- INVALID_DECK: a deck violates an encoder invariant
- VERSION: token was written by a newer protocol version
- DECODE: token is not canonical unpadded base-32, or is empty
- VARINT_DECODE: byte stream ends inside a varint or a record

Errors are raised to the caller. Nothing is logged, retried or defaulted
here, and no partial deck is ever returned.

At the HTTP boundary errors are converted to ApiResponse, a tagged
success/failure envelope.
"""

from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field


class DeckCodeErrorKind(str, Enum):
    """Classification of codec failures."""

    INVALID_CARD = "invalid_card"
    INVALID_DECK = "invalid_deck"
    VERSION = "version"
    DECODE = "decode"
    VARINT_DECODE = "varint_decode"

    # Anything that escaped the taxonomy
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: DeckCodeErrorKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the caller",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Tagged result envelope.

    Exactly one of `data` (on success) or `failure` (otherwise) is set.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def known_failure(
        cls,
        kind: DeckCodeErrorKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """Create a known failure response."""
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def unknown_failure(
        cls,
        detail: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create an unknown failure response.

        The message is fixed; only the technical detail varies.
        """
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=DeckCodeErrorKind.UNKNOWN,
                message="I failed and I don't know why.",
                detail=detail,
                suggestion="If this persists, please report the issue.",
            ),
        )


class DeckCodeError(Exception):
    """
    Base class for every codec failure.

    Subclasses pin `kind`; instances carry a message plus optional detail
    and suggestion.
    """

    kind: ClassVar[DeckCodeErrorKind] = DeckCodeErrorKind.UNKNOWN
    default_suggestion: ClassVar[str | None] = None

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.detail = detail
        self.suggestion = suggestion or self.default_suggestion
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InvalidCardError(DeckCodeError):
    """Malformed card code, unknown faction, or count below 1."""

    kind = DeckCodeErrorKind.INVALID_CARD


class InvalidDeckError(DeckCodeError):
    """A deck handed to the encoder violates an encoder invariant."""

    kind = DeckCodeErrorKind.INVALID_DECK


class VersionError(DeckCodeError):
    """Token requires a newer protocol version than this library knows."""

    kind = DeckCodeErrorKind.VERSION
    default_suggestion = "Update to a newer version of this library."

    def __init__(self, version: int, max_version: int):
        self.version = version
        self.max_version = max_version
        super().__init__(
            "The provided code requires a higher version of this library.",
            detail=f"Code version {version}, highest supported {max_version}",
        )


class DecodeError(DeckCodeError):
    """Token text is not canonical unpadded base-32, or carries no bytes."""

    kind = DeckCodeErrorKind.DECODE


class VarintDecodeError(DeckCodeError):
    """Byte stream ended inside a varint, or a varint was too long."""

    kind = DeckCodeErrorKind.VARINT_DECODE
