"""An on-chain identity: keys with purposes (ERC-734) and claims (ERC-735)."""

from __future__ import annotations

import struct
from dataclasses import replace

from Crypto.Hash import keccak
from Crypto.Signature import eddsa

from .errors import (
    ClaimSignatureError,
    IssuerKeyNotAuthorizedError,
    KeyAlreadyHasPurposeError,
    KeyDoesntHavePurposeError,
    KeyNotRegisteredError,
    NoClaimFoundError,
    NoClaimTopicFoundError,
)
from .structs import Claim, DataKey, Key, _fixed_bytes, _u32

MANAGEMENT_PURPOSE = 1
ACTION_PURPOSE = 2
CLAIM_SIGNER_PURPOSE = 3
ENCRYPTION_PURPOSE = 4

# Value-type tags used when a value is serialised for hashing.
_XDR_U32 = 3
_XDR_BYTES = 13


def _xdr_bytes(value: bytes) -> bytes:
    padding = b"\x00" * (-len(value) % 4)
    return struct.pack(">II", _XDR_BYTES, len(value)) + value + padding


def _xdr_u32(value: int) -> bytes:
    return struct.pack(">II", _XDR_U32, value)


def claim_id_for(issuer: bytes, topic: int) -> bytes:
    """Return the 32-byte id of the claim an issuer makes on a topic."""
    issuer = _fixed_bytes(issuer, 32, "issuer")
    topic = _u32(topic, "topic")
    digest = keccak.new(digest_bits=256)
    digest.update(_xdr_bytes(issuer) + _xdr_u32(topic))
    return digest.digest()


def claim_message(identity: bytes, topic: int, data: bytes) -> bytes:
    """Return the message an issuer signs: identity, big-endian topic, data."""
    identity = _fixed_bytes(identity, 32, "identity")
    topic = _u32(topic, "topic")
    return identity + struct.pack(">I", topic) + bytes(data)


def _swap_remove(items: list, index: int) -> None:
    items[index] = items[-1]
    items.pop()


class Identity:
    """Keys, their purposes and the claims published about one identity."""

    def __init__(self) -> None:
        self._storage: dict[DataKey, object] = {}

    # Keys

    def add_key(self, key: bytes, purpose: int, key_type: int) -> bool:
        """Give a key a purpose, registering the key if it is new."""
        storage_key = DataKey.key(key)
        purpose = _u32(purpose, "purpose")
        stored = self._storage.get(storage_key)
        if stored is None:
            self._storage[storage_key] = Key([purpose], key_type, key)
        else:
            if purpose in stored.purposes:
                raise KeyAlreadyHasPurposeError()
            stored.purposes.append(purpose)

        self._storage.setdefault(DataKey.purpose(purpose), []).append(bytes(key))
        return True

    def remove_key(self, key: bytes, purpose: int) -> bool:
        """Take a purpose away from a key; a key left with none is dropped."""
        storage_key = DataKey.key(key)
        stored = self._storage.get(storage_key)
        if stored is None:
            raise KeyNotRegisteredError()
        try:
            index = stored.purposes.index(purpose)
        except ValueError:
            raise KeyDoesntHavePurposeError() from None
        _swap_remove(stored.purposes, index)
        if not stored.purposes:
            del self._storage[storage_key]

        holders = self._storage.get(DataKey.purpose(purpose))
        if holders is not None and bytes(key) in holders:
            _swap_remove(holders, holders.index(bytes(key)))
        return True

    def get_key(self, key: bytes) -> Key:
        """Return the full record of a registered key."""
        stored = self._storage.get(DataKey.key(key))
        if stored is None:
            raise KeyNotRegisteredError()
        return replace(stored, purposes=list(stored.purposes))

    def get_key_purposes(self, key: bytes) -> list[int]:
        """Return the purposes of a registered key."""
        return self.get_key(key).purposes

    def get_keys_by_purpose(self, purpose: int) -> list[bytes]:
        """Return every key that holds a purpose, oldest first."""
        return list(self._storage.get(DataKey.purpose(purpose), []))

    def key_has_purpose(self, key: bytes, purpose: int) -> bool:
        """Tell whether a registered key holds a purpose.

        A query for the management purpose is answered yes for any key
        that holds at least one purpose.
        """
        stored = self._storage.get(DataKey.key(key))
        if stored is None:
            raise KeyNotRegisteredError()
        return any(
            purpose == MANAGEMENT_PURPOSE or purpose == held
            for held in stored.purposes
        )

    # Claims

    def add_claim(
        self,
        topic: int,
        scheme: int,
        issuer: bytes,
        signature: bytes,
        data: bytes,
        uri: str,
    ) -> bytes:
        """Add a claim, or update the issuer's claim on the topic; return its id."""
        claim = Claim(topic, scheme, issuer, signature, data, uri)
        claim_id = claim_id_for(claim.issuer, claim.topic)
        storage_key = DataKey.claim(claim_id)
        is_new = storage_key not in self._storage
        self._storage[storage_key] = claim
        if is_new:
            self._storage.setdefault(DataKey.claim_topic(claim.topic), []).append(
                claim_id
            )
        return claim_id

    def get_claim(self, claim_id: bytes) -> Claim:
        """Return the claim stored under an id."""
        stored = self._storage.get(DataKey.claim(claim_id))
        if stored is None:
            raise NoClaimFoundError()
        return replace(stored)

    def remove_claim(self, claim_id: bytes) -> bool:
        """Remove the claim stored under an id."""
        storage_key = DataKey.claim(claim_id)
        stored = self._storage.pop(storage_key, None)
        if stored is None:
            raise NoClaimFoundError()
        ids = self._storage.get(DataKey.claim_topic(stored.topic))
        if ids is not None and bytes(claim_id) in ids:
            ids.remove(bytes(claim_id))
        return True

    def get_claim_ids_by_topic(self, topic: int) -> list[bytes]:
        """Return the ids of the claims filed under a topic."""
        ids = self._storage.get(DataKey.claim_topic(topic))
        if ids is None:
            raise NoClaimTopicFoundError()
        return list(ids)

    # Claim issuing

    def is_claim_valid(
        self,
        identity: bytes,
        issuer: bytes,
        topic: int,
        sig: bytes,
        data: bytes,
    ) -> bool:
        """Check that a claim was signed by a registered claim-signer key."""
        message = claim_message(identity, topic, data)
        sig = _fixed_bytes(sig, 64, "sig")
        try:
            authorized = self.key_has_purpose(issuer, CLAIM_SIGNER_PURPOSE)
        except KeyNotRegisteredError:
            authorized = False
        if not authorized:
            raise IssuerKeyNotAuthorizedError()

        try:
            public_key = eddsa.import_public_key(bytes(issuer))
            eddsa.new(public_key, "rfc8032").verify(message, sig)
        except ValueError:
            raise ClaimSignatureError() from None
        return True