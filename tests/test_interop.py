"""Cross-check against the PKCS7 padding in ``cryptography``."""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from hypothesis import given
from hypothesis.strategies import binary, integers

from pypkcs7.codec import PKCS7
from pypkcs7.exceptions import BadPaddingError
from pypkcs7.padding import pad, unpad


@given(binary(), integers(min_value=1, max_value=31))
def test_pad_matches_cryptography(data: bytes, block_size: int) -> None:
    padder = padding.PKCS7(block_size * 8).padder()
    expected = padder.update(data) + padder.finalize()
    assert pad(data, block_size) == expected


@given(binary(), integers(min_value=1, max_value=31))
def test_cryptography_unpads_our_padding(data: bytes, block_size: int) -> None:
    unpadder = padding.PKCS7(block_size * 8).unpadder()
    assert unpadder.update(pad(data, block_size)) + unpadder.finalize() == data


def test_aes_cbc_round_trip() -> None:
    key = bytes(range(16))
    iv = b"\x00" * 16
    plaintext = b"attack at dawn, bring snacks"

    cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
    encryptor = cipher.encryptor()
    ct = encryptor.update(pad(plaintext, 16)) + encryptor.finalize()

    decryptor = cipher.decryptor()
    assert unpad(decryptor.update(ct) + decryptor.finalize(), 16) == plaintext


def test_aes_cbc_streaming_round_trip() -> None:
    key = bytes(range(16))
    iv = bytes(range(16, 32))
    codec = PKCS7(16)
    plaintext = b"x" * 100

    cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
    encryptor = cipher.encryptor()
    padder = codec.padder()
    ct = b""
    for start in range(0, len(plaintext), 30):
        ct += encryptor.update(padder.update(plaintext[start : start + 30]))
    ct += encryptor.update(padder.finalize()) + encryptor.finalize()

    decryptor = cipher.decryptor()
    unpadder = codec.unpadder()
    out = unpadder.update(decryptor.update(ct)) + unpadder.update(decryptor.finalize())
    assert out + unpadder.finalize() == plaintext


def test_both_reject_tampered_padding() -> None:
    tampered = b"\x19\xc9\x03\x02"
    unpadder = padding.PKCS7(32).unpadder()
    with pytest.raises(ValueError):
        unpadder.update(tampered) + unpadder.finalize()
    with pytest.raises(BadPaddingError):
        unpad(tampered, 4)
