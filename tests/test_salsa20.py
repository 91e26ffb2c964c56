import pytest
from hypothesis import given, strategies as st

from lockcipher.base64codec import encode
from lockcipher.errors import CipherError
from lockcipher.salsa20 import (
    keystream_xor,
    load_password,
    salsa20_block,
    save_password,
)

NONCE = bytes(range(8))
PASSWORD = "password"
ENCODED = encode(save_password(PASSWORD, NONCE))
nonces = st.binary(min_size=8, max_size=8)


def test_block_is_64_bytes_and_deterministic():
    block = salsa20_block(NONCE, 0)
    assert len(block) == 64
    assert salsa20_block(NONCE, 0) == block


def test_blocks_differ_by_counter_and_nonce():
    assert salsa20_block(NONCE, 0) != salsa20_block(NONCE, 1)
    assert salsa20_block(NONCE, 0) != salsa20_block(bytes(8), 0)


def test_keystream_uses_successive_counters():
    stream = keystream_xor(bytes(130), NONCE)
    assert stream[:64] == salsa20_block(NONCE, 0)
    assert stream[64:128] == salsa20_block(NONCE, 1)
    assert stream[128:] == salsa20_block(NONCE, 2)[:2]


@given(st.binary(max_size=300), nonces)
def test_keystream_is_involution(data, nonce):
    assert keystream_xor(keystream_xor(data, nonce), nonce) == data


def test_save_layout():
    saved = save_password(PASSWORD, NONCE)
    assert saved[:8] == NONCE
    assert len(saved) == 8 + len(PASSWORD)
    assert saved[8:] == keystream_xor(PASSWORD.encode(), NONCE)


@pytest.mark.parametrize(
    "call",
    [lambda: salsa20_block(b"short", 0), lambda: save_password(PASSWORD, b"123")],
)
def test_bad_nonce_rejected(call):
    with pytest.raises(CipherError):
        call()


@given(st.binary().map(lambda b: b.replace(b"\0", b"\1")), nonces)
def test_round_trip(plain, nonce):
    assert load_password(encode(save_password(plain, nonce))) == plain


@pytest.mark.parametrize(
    "encoded, max_length, expected",
    [
        (encode(save_password(PASSWORD)), None, PASSWORD.encode()),
        (encode(NONCE), None, b""),
        (ENCODED, 3, b"pa"),
    ],
)
def test_load(encoded, max_length, expected):
    assert load_password(encoded, max_length) == expected


@pytest.mark.parametrize(
    "encoded, max_length",
    [(encode(b"1234567"), None), ("", None), ("!!!!", None), (ENCODED, 0)],
)
def test_load_rejected(encoded, max_length):
    with pytest.raises(CipherError):
        load_password(encoded, max_length)