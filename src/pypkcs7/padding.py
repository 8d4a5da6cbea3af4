"""PKCS #7 padding as specified in RFC 5652, section 6.3.

Padding appends ``n`` bytes, each of value ``n``, where ``n`` is the
number of bytes needed to reach the next multiple of the block size.
Aligned input (including empty input) always gains a full block.

Layout of a padded buffer::

    [ payload ... ][ n ][ n ] ... [ n ]

Integrators unpadding attacker-controlled ciphertext should not report
:class:`~pypkcs7.exceptions.BadPaddingError` and
:class:`~pypkcs7.exceptions.NotFullBlocksError` differently to the peer:
distinguishable failures recreate the classic padding-oracle attack.  See
:class:`pypkcs7.codec.PKCS7` with ``opaque_errors=True``.  The trailing
run comparison here is not constant-time.
"""

from __future__ import annotations

from typing import TypeVar

from pypkcs7._constants import MAX_BLOCK_SIZE, MIN_BLOCK_SIZE
from pypkcs7.exceptions import (
    BadPaddingError,
    EmptyInputError,
    InvalidBlockSizeError,
    NotFullBlocksError,
)

_BufferT = TypeVar("_BufferT", bytes, bytearray, memoryview)


def check_block_size(block_size: int) -> None:
    """Raise :class:`InvalidBlockSizeError` unless ``1 <= block_size <= 255``."""
    if isinstance(block_size, bool) or not isinstance(block_size, int):
        raise InvalidBlockSizeError()
    if not MIN_BLOCK_SIZE <= block_size <= MAX_BLOCK_SIZE:
        raise InvalidBlockSizeError()


def _padding_for(length: int, block_size: int) -> bytes:
    diff = block_size - length % block_size
    return bytes([diff]) * diff


def pad(data: bytes | bytearray | memoryview, block_size: int) -> bytes:
    """Return a padded copy of *data*.

    Parameters
    ----------
    data : bytes-like
        Payload to pad. May be empty. Never modified.
    block_size : int
        Block size in bytes (1-255).

    Returns
    -------
    bytes
        New buffer whose length is a multiple of *block_size* and
        between 1 and *block_size* bytes longer than *data*.

    Raises
    ------
    InvalidBlockSizeError
        If *block_size* is out of range.
    """
    check_block_size(block_size)
    return bytes(data) + _padding_for(len(data), block_size)


def pad_into(buffer: bytearray, block_size: int) -> bytearray:
    """Pad *buffer* in place and return the same object.

    The caller's buffer is extended; any other reference to it observes
    the padding afterwards.  Copy first (``bytearray(buf)``) if the
    original contents must survive.

    Raises
    ------
    InvalidBlockSizeError
        If *block_size* is out of range. *buffer* is left untouched.
    """
    check_block_size(block_size)
    buffer.extend(_padding_for(len(buffer), block_size))
    return buffer


def unpad(data: _BufferT, block_size: int) -> _BufferT:
    """Strip and validate PKCS #7 padding.

    Parameters
    ----------
    data : bytes, bytearray or memoryview
        Padded buffer.
    block_size : int
        Block size in bytes (1-255) the data was padded to.

    Returns
    -------
    bytes, bytearray or memoryview
        ``data[:len(data) - count]``, a slice of the same type as *data*.
        For a ``memoryview`` no copy is made: the result shares storage
        with the input, so the underlying buffer must not be mutated while
        the result is in use.

    Raises
    ------
    InvalidBlockSizeError
        If *block_size* is out of range.
    EmptyInputError
        If *data* is empty.
    NotFullBlocksError
        If ``len(data)`` is not a multiple of *block_size*.
    BadPaddingError
        If the count byte exceeds *block_size* or the buffer length, or any
        byte of the trailing run differs from it.
    """
    check_block_size(block_size)

    data_len = len(data)
    if data_len == 0:
        raise EmptyInputError()
    if data_len % block_size != 0:
        raise NotFullBlocksError()

    count = data[-1]
    if count > block_size:
        raise BadPaddingError()
    # Aligned non-empty input has len >= block_size, so this never fires.
    if count > data_len:
        raise BadPaddingError()

    pos = data_len - count
    for value in data[pos:]:
        if value != count:
            raise BadPaddingError()

    return data[:pos]
