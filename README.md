# onchainid

An in-memory identity store modelled on the ERC-734 (key management) and
ERC-735 (claim holder) standards.

An `onchainid.identity.Identity` holds:

* **keys**: 32-byte public keys, each with one or more purposes and a key type.
  The purposes are available as constants in `onchainid.identity`:
  `MANAGEMENT_PURPOSE` (1), `ACTION_PURPOSE` (2), `CLAIM_SIGNER_PURPOSE` (3)
  and `ENCRYPTION_PURPOSE` (4).
* **claims**: statements that an issuer makes about the identity. A claim is
  stored under a 32-byte claim id, the Keccak-256 hash of the serialised
  issuer key and topic.

It can also check an issuer's Ed25519 signature over a claim.

## Installation

```
pip install onchainid
```

## Usage

```python
from Crypto.PublicKey import ECC
from Crypto.Signature import eddsa

from onchainid.identity import Identity, claim_message

identity = Identity()

# The issuer's key becomes a claim signer (purpose 3), key type 1.
signing_key = ECC.generate(curve="ed25519")
issuer = signing_key.public_key().export_key(format="raw")
identity.add_key(issuer, 3, 1)

subject = bytes(32)          # the identity the claim is about
topic = 1010101
data = b"true"
signature = eddsa.new(signing_key, "rfc8032").sign(claim_message(subject, topic, data))

claim_id = identity.add_claim(topic, 1, issuer, signature, data, "")
print(identity.get_claim(claim_id))            # a Claim record
print(identity.get_claim_ids_by_topic(topic))  # [claim_id]

assert identity.is_claim_valid(subject, issuer, topic, signature, data)
```

### Keys

| Method | Result |
| --- | --- |
| `add_key(key, purpose, key_type)` | `True`; registers the key if new; raises `KeyAlreadyHasPurposeError` if the key already has that purpose |
| `remove_key(key, purpose)` | `True`; a key left with no purposes is dropped; raises `KeyNotRegisteredError` or `KeyDoesntHavePurposeError` |
| `get_key(key)` | a copy of the `Key` record (`purposes`, `key_type`, `key`); raises `KeyNotRegisteredError` |
| `get_key_purposes(key)` | list of purposes; raises `KeyNotRegisteredError` |
| `get_keys_by_purpose(purpose)` | list of keys holding the purpose, empty if none |
| `key_has_purpose(key, purpose)` | `True` or `False`; asking for purpose 1 (management) answers `True` for any registered key; raises `KeyNotRegisteredError` |

Removing a purpose moves the last entry of a list into the removed slot, so
the order of purposes and of keys by purpose can change after a removal.

### Claims

| Method | Result |
| --- | --- |
| `add_claim(topic, scheme, issuer, signature, data, uri)` | the claim id; adding again for the same issuer and topic replaces the stored claim |
| `get_claim(claim_id)` | a copy of the `Claim` record (`topic`, `scheme`, `issuer`, `signature`, `data`, `uri`); raises `NoClaimFoundError` |
| `remove_claim(claim_id)` | `True`; raises `NoClaimFoundError` |
| `get_claim_ids_by_topic(topic)` | list of claim ids; raises `NoClaimTopicFoundError` if no claim was ever filed under the topic |
| `is_claim_valid(identity, issuer, topic, sig, data)` | `True`; raises `IssuerKeyNotAuthorizedError` if the issuer is not a registered claim signer here, or `ClaimSignatureError` if the signature does not verify |

Two helpers work without an `Identity`:

* `claim_id_for(issuer, topic)` computes a claim id.
* `claim_message(identity, topic, data)` builds the bytes an issuer signs:
  the 32-byte identity, the topic as a big-endian 32-bit integer, then the data.

Issuer and identity keys must be 32 bytes, signatures 64 bytes, and topics,
schemes, purposes and key types unsigned 32-bit integers; other values raise
`TypeError` or `ValueError`.

### Records

`onchainid.structs` holds the dataclasses `Key`, `Claim` and `Execution`
(an unsigned 256-bit `value`, `to`, `data`, `approved`, `executed`), and
`DataKey`, the hashable storage key built with `DataKey.key`,
`DataKey.purpose`, `DataKey.claim` and `DataKey.claim_topic`.

### Errors

Every error derives from `onchainid.errors.OnChainIdError`. All but
`ClaimSignatureError` carry an `ErrorCode` in their `code` attribute
(1 to 6). `error_for_code(code)` returns a new exception instance for a
numeric code and raises `ValueError` for an unknown one.

## What it does not do

* Everything is kept in memory on the `Identity` object; nothing is persisted.
* There is no access control: any caller may add or remove keys and claims.
* No events are emitted, and `Execution` records are defined but nothing
  creates or runs them.
* `add_claim` stores a claim without checking its signature; call
  `is_claim_valid` for that.

## Running the tests

```
pip install -e ".[test]"
pytest
```