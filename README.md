# lockcipher

Small, dependency-free routines for scrambling a stored password before it
is written somewhere, and for reading it back again. Three schemes are
provided:

- `lockcipher.xor`: repeating-key XOR
- `lockcipher.xtea`: XTEA in ECB mode with PKCS#7-style padding to 8-byte blocks
- `lockcipher.salsa20`: Salsa20/20 keystream, with the 8-byte nonce placed
  before the ciphertext

Each scheme uses a fixed built-in key. It hides a password from casual
reading, and nothing more. Do not use it where real confidentiality matters.

## Installation

```
pip install lockcipher
```

## Usage

Each `save_password` takes a `str` (encoded as UTF-8) or `bytes` and returns
the raw encrypted bytes. Anything after the first NUL byte of the password
is ignored. Store the result as base64 text with
`lockcipher.base64codec.encode`.

Each `load_password(encoded, max_length=None)` takes that base64 text and
returns the recovered password as `bytes`. `max_length` is a buffer size
that counts a terminator, so at most `max_length - 1` bytes come back; leave
it out to get the whole password.

```python
from lockcipher import base64codec, xtea

password = "password"
stored = base64codec.encode(xtea.save_password(password))
assert xtea.load_password(stored) == b"password"
assert xtea.load_password(stored, 5) == b"pass"
```

`salsa20.save_password` picks a random 8-byte nonce with `os.urandom`, or
uses the one it is given. The nonce is kept at the start of the output, so
loading only needs the stored text:

```python
from lockcipher import base64codec, salsa20

password = "password"
blob = salsa20.save_password(password)
assert salsa20.load_password(base64codec.encode(blob)) == b"password"
```

## Base64

`base64codec.encode(data)` gives padded base64 text with the standard
alphabet. `base64codec.decode(encoded)` is lenient: characters outside the
alphabet (other than `=`) are skipped, and a trailing group of fewer than
four symbols is dropped rather than reported.

## Errors

`lockcipher.errors.CipherError`, a subclass of `ValueError`, is raised when:

- the encoded text is empty or decodes to no bytes
- `max_length` is zero or negative
- XTEA ciphertext is not a whole number of 8-byte blocks, or its padding is bad
- Salsa20 data is shorter than the 8-byte nonce, or a nonce of the wrong size is given
- `xor.xor_cipher` is given an empty key

## Lower-level functions

- `xor.xor_cipher(data, key)`
- `xtea.encrypt_block(v0, v1, key_words)` and `xtea.decrypt_block(v0, v1, key_words)`,
  working on two 32-bit words
- `xtea.pad(data)` and `xtea.unpad(data)`
- `salsa20.salsa20_block(nonce, counter)`, one 64-byte keystream block
- `salsa20.keystream_xor(data, nonce)`, which both encrypts and decrypts

## What it does not do

The package only turns passwords into bytes and back. It does not read or
write settings files, keep any configuration, or provide a command-line
tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```