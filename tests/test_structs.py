import pytest

from onchainid.structs import Claim, DataKey, DataKeyKind, Execution, Key

KEY_BYTES = bytes(range(32))
SIG_BYTES = bytes(range(64))


def test_key_holds_values():
    key = Key(purposes=[3], key_type=1, key=KEY_BYTES)
    assert key.purposes == [3]
    assert key.key_type == 1
    assert key.key == KEY_BYTES


def test_key_copies_purposes_list():
    purposes = [1, 3]
    key = Key(purposes=purposes, key_type=1, key=KEY_BYTES)
    purposes.append(4)
    assert key.purposes == [1, 3]


def test_key_accepts_bytearray():
    key = Key(purposes=[1], key_type=1, key=bytearray(KEY_BYTES))
    assert key.key == KEY_BYTES and isinstance(key.key, bytes)


@pytest.mark.parametrize("length", [0, 31, 33])
def test_key_wrong_length_raises(length):
    with pytest.raises(ValueError):
        Key(purposes=[1], key_type=1, key=bytes(length))


def test_key_purpose_out_of_range_raises():
    with pytest.raises(ValueError):
        Key(purposes=[2**32], key_type=1, key=KEY_BYTES)


def test_key_max_u32_purpose_accepted():
    key = Key(purposes=[2**32 - 1], key_type=1, key=KEY_BYTES)
    assert key.purposes == [2**32 - 1]


def test_execution_defaults():
    execution = Execution(to="contract", value=10)
    assert execution.data == b""
    assert execution.approved is False
    assert execution.executed is False


def test_execution_value_bounds():
    assert Execution(to="c", value=2**256 - 1).value == 2**256 - 1
    with pytest.raises(ValueError):
        Execution(to="c", value=2**256)
    with pytest.raises(ValueError):
        Execution(to="c", value=-1)


def test_claim_holds_values():
    claim = Claim(1010101, 1, KEY_BYTES, SIG_BYTES, b"true", "")
    assert (claim.topic, claim.scheme, claim.issuer, claim.signature, claim.data, claim.uri) == (
        1010101,
        1,
        KEY_BYTES,
        SIG_BYTES,
        b"true",
        "",
    )


def test_claim_signature_must_be_64_bytes():
    with pytest.raises(ValueError):
        Claim(1, 1, KEY_BYTES, bytes(63), b"", "")


def test_claim_uri_must_be_str():
    with pytest.raises(TypeError):
        Claim(1, 1, KEY_BYTES, SIG_BYTES, b"", b"uri")


def test_data_key_constructors_set_kind():
    assert DataKey.key(KEY_BYTES).kind is DataKeyKind.KEY
    assert DataKey.purpose(3).kind is DataKeyKind.PURPOSE
    assert DataKey.claim(KEY_BYTES).kind is DataKeyKind.CLAIM
    assert DataKey.claim_topic(3).kind is DataKeyKind.CLAIM_TOPIC


def test_data_keys_equal_and_hash_by_value():
    store = {DataKey.purpose(3): "keys"}
    assert store[DataKey.purpose(3)] == "keys"
    assert DataKey.key(KEY_BYTES) == DataKey.key(bytearray(KEY_BYTES))


def test_data_keys_of_different_kind_differ():
    assert DataKey.purpose(3) != DataKey.claim_topic(3)
    assert DataKey.key(KEY_BYTES) != DataKey.claim(KEY_BYTES)


def test_data_key_is_frozen():
    data_key = DataKey.purpose(3)
    with pytest.raises(AttributeError):
        data_key.value = 4
    assert data_key == DataKey.purpose(3)
    assert data_key != DataKey.purpose(4)
    assert data_key.kind is DataKeyKind.PURPOSE


def test_data_key_validation():
    with pytest.raises(ValueError):
        DataKey.claim(bytes(16))
    with pytest.raises(ValueError):
        DataKey.claim_topic(-1)
    with pytest.raises(TypeError):
        DataKey.purpose(b"\x03")