"""Records stored by an identity: keys, executions, claims and storage keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_U32_MAX = 2**32 - 1
_U256_LIMIT = 2**256


def _u32(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} must fit in an unsigned 32-bit integer")
    return value


def _fixed_bytes(value: bytes, length: int, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes")
    value = bytes(value)
    if len(value) != length:
        raise ValueError(f"{name} must be exactly {length} bytes, got {len(value)}")
    return value


def _bytes(value: bytes, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes")
    return bytes(value)


@dataclass
class Key:
    """A public key held by an identity, with its purposes and key type."""

    purposes: list[int]
    key_type: int
    key: bytes

    def __post_init__(self) -> None:
        self.purposes = [_u32(p, "purpose") for p in self.purposes]
        self.key_type = _u32(self.key_type, "key_type")
        self.key = _fixed_bytes(self.key, 32, "key")


@dataclass
class Execution:
    """A request for a transaction to be issued by the identity."""

    to: str
    value: int
    data: bytes = b""
    approved: bool = False
    executed: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("value must be an integer")
        if not 0 <= self.value < _U256_LIMIT:
            raise ValueError("value must fit in an unsigned 256-bit integer")
        self.data = _bytes(self.data, "data")


@dataclass
class Claim:
    """Information an issuer has published about the identity holder."""

    topic: int
    scheme: int
    issuer: bytes
    signature: bytes
    data: bytes
    uri: str = ""

    def __post_init__(self) -> None:
        self.topic = _u32(self.topic, "topic")
        self.scheme = _u32(self.scheme, "scheme")
        self.issuer = _fixed_bytes(self.issuer, 32, "issuer")
        self.signature = _fixed_bytes(self.signature, 64, "signature")
        self.data = _bytes(self.data, "data")
        if not isinstance(self.uri, str):
            raise TypeError("uri must be a string")


class DataKeyKind(Enum):
    """The kinds of entry an identity keeps in storage."""

    KEY = "key"
    PURPOSE = "purpose"
    CLAIM = "claim"
    CLAIM_TOPIC = "claim_topic"


@dataclass(frozen=True)
class DataKey:
    """A storage key: a kind together with the value it is indexed by."""

    kind: DataKeyKind
    value: bytes | int = field()

    def __post_init__(self) -> None:
        if self.kind in (DataKeyKind.KEY, DataKeyKind.CLAIM):
            checked: bytes | int = _fixed_bytes(self.value, 32, self.kind.value)
        else:
            checked = _u32(self.value, self.kind.value)
        object.__setattr__(self, "value", checked)

    @classmethod
    def key(cls, key: bytes) -> DataKey:
        """Storage key of a registered public key."""
        return cls(DataKeyKind.KEY, key)

    @classmethod
    def purpose(cls, purpose: int) -> DataKey:
        """Storage key of the list of keys holding a purpose."""
        return cls(DataKeyKind.PURPOSE, purpose)

    @classmethod
    def claim(cls, claim_id: bytes) -> DataKey:
        """Storage key of a claim."""
        return cls(DataKeyKind.CLAIM, claim_id)

    @classmethod
    def claim_topic(cls, topic: int) -> DataKey:
        """Storage key of the list of claim ids under a topic."""
        return cls(DataKeyKind.CLAIM_TOPIC, topic)