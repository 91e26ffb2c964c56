import base64

from hypothesis import given, strategies as st

from lockcipher.base64codec import decode, encode


@given(st.binary())
def test_encode_matches_stdlib(data):
    assert encode(data) == base64.b64encode(data).decode("ascii")


@given(st.binary())
def test_round_trip(data):
    assert decode(encode(data)) == data


@given(st.binary())
def test_decode_matches_stdlib_on_valid_input(data):
    text = base64.b64encode(data).decode("ascii")
    assert decode(text) == base64.b64decode(text)


def test_encode_empty():
    assert encode(b"") == ""


def test_decode_empty():
    assert decode("") == b""


def test_encoded_length_is_multiple_of_four():
    for size in range(10):
        assert len(encode(b"x" * size)) % 4 == 0


def test_decode_ignores_foreign_characters():
    data = b"some password bytes"
    text = encode(data)
    noisy = "\n".join(text[i:i + 4] for i in range(0, len(text), 4)) + " \t*"
    assert decode(noisy) == data


def test_decode_only_garbage_gives_nothing():
    assert decode("!!!! ****") == b""


def test_decode_drops_incomplete_trailing_group():
    first = encode(b"abc")
    assert decode(first + encode(b"def")[:2]) == b"abc"