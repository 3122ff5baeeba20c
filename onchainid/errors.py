"""Errors raised by an on-chain identity, each tied to a numeric error code."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric codes reported by identity operations."""

    KEY_NOT_REGISTERED = 1
    KEY_ALREADY_HAS_PURPOSE = 2
    KEY_DOESNT_HAVE_PURPOSE = 3
    NO_CLAIM_FOUND = 4
    NO_CLAIM_TOPIC_FOUND = 5
    ISSUER_KEY_NOT_AUTHORIZED = 6


class OnChainIdError(Exception):
    """Base class of every error raised by an identity."""

    code: ErrorCode | None = None
    default_message = "on-chain identity error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class KeyNotRegisteredError(OnChainIdError):
    """The key is not registered on the identity."""

    code = ErrorCode.KEY_NOT_REGISTERED
    default_message = "key is not registered"


class KeyAlreadyHasPurposeError(OnChainIdError):
    """The key already carries the given purpose."""

    code = ErrorCode.KEY_ALREADY_HAS_PURPOSE
    default_message = "key already has this purpose"


class KeyDoesntHavePurposeError(OnChainIdError):
    """The key does not carry the given purpose."""

    code = ErrorCode.KEY_DOESNT_HAVE_PURPOSE
    default_message = "key does not have this purpose"


class NoClaimFoundError(OnChainIdError):
    """No claim is stored under the given id."""

    code = ErrorCode.NO_CLAIM_FOUND
    default_message = "no claim found"


class NoClaimTopicFoundError(OnChainIdError):
    """No claims are stored under the given topic."""

    code = ErrorCode.NO_CLAIM_TOPIC_FOUND
    default_message = "no claim topic found"


class IssuerKeyNotAuthorizedError(OnChainIdError):
    """The issuer key is not registered as a claim signer."""

    code = ErrorCode.ISSUER_KEY_NOT_AUTHORIZED
    default_message = "issuer key is not authorized"


class ClaimSignatureError(OnChainIdError):
    """A claim signature failed to verify against the issuer key."""

    code = None
    default_message = "claim signature is invalid"


_ERRORS_BY_CODE: dict[ErrorCode, type[OnChainIdError]] = {
    cls.code: cls
    for cls in (
        KeyNotRegisteredError,
        KeyAlreadyHasPurposeError,
        KeyDoesntHavePurposeError,
        NoClaimFoundError,
        NoClaimTopicFoundError,
        IssuerKeyNotAuthorizedError,
    )
}


def error_for_code(code: int) -> OnChainIdError:
    """Return a new exception instance for a numeric error code."""
    try:
        error_code = ErrorCode(code)
    except ValueError:
        raise ValueError(f"unknown error code: {code!r}") from None
    return _ERRORS_BY_CODE[error_code]()