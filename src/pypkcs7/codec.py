"""Block-size-bound PKCS #7 codec with incremental padder/unpadder contexts.

The incremental contexts follow the ``update()``/``finalize()`` shape of
``cryptography.hazmat.primitives.padding`` so they can sit directly in
front of a cipher context that is fed in chunks.
"""

from __future__ import annotations

import logging

from pypkcs7.exceptions import (
    AlreadyFinalizedError,
    InvalidBlockSizeError,
    PaddingError,
    UnpaddingError,
)
from pypkcs7.padding import check_block_size, pad, unpad

_logger = logging.getLogger(__name__)


def _opaque(exc: PaddingError) -> UnpaddingError:
    _logger.debug("Unpadding failed (%s); reporting generic error", exc.kind.value)
    return UnpaddingError()


class Padder:
    """Incremental padding context.

    :meth:`update` returns only whole blocks; the remainder is held back
    and padded by :meth:`finalize`.

    Raises
    ------
    InvalidBlockSizeError
        If *block_size* is out of range.
    """

    def __init__(self, block_size: int) -> None:
        check_block_size(block_size)
        self._block_size = block_size
        self._buffer: bytearray | None = bytearray()

    def update(self, data: bytes | bytearray | memoryview) -> bytes:
        """Buffer *data* and return the whole blocks accumulated so far.

        Raises
        ------
        AlreadyFinalizedError
            If :meth:`finalize` was already called.
        """
        if self._buffer is None:
            raise AlreadyFinalizedError("Context was already finalized.")
        self._buffer += data
        ready = len(self._buffer) - len(self._buffer) % self._block_size
        out = bytes(self._buffer[:ready])
        del self._buffer[:ready]
        return out

    def finalize(self) -> bytes:
        """Pad and return the buffered remainder.

        Returns
        -------
        bytes
            Between 1 and *block_size* bytes: the held-back partial block
            followed by its padding.

        Raises
        ------
        AlreadyFinalizedError
            If :meth:`finalize` was already called.
        """
        if self._buffer is None:
            raise AlreadyFinalizedError("Context was already finalized.")
        buffer, self._buffer = self._buffer, None
        return pad(buffer, self._block_size)


class Unpadder:
    """Incremental unpadding context.

    The last full block seen so far is always held back by :meth:`update`
    because it may carry the padding.  Validation happens in
    :meth:`finalize`.

    Raises
    ------
    InvalidBlockSizeError
        If *block_size* is out of range.
    """

    def __init__(self, block_size: int, *, opaque_errors: bool = False) -> None:
        check_block_size(block_size)
        self._block_size = block_size
        self._opaque_errors = opaque_errors
        self._buffer: bytearray | None = bytearray()

    def update(self, data: bytes | bytearray | memoryview) -> bytes:
        """Buffer *data* and return every whole block except the last.

        Raises
        ------
        AlreadyFinalizedError
            If :meth:`finalize` was already called.
        """
        if self._buffer is None:
            raise AlreadyFinalizedError("Context was already finalized.")
        self._buffer += data
        if not self._buffer:
            return b""
        ready = ((len(self._buffer) - 1) // self._block_size) * self._block_size
        out = bytes(self._buffer[:ready])
        del self._buffer[:ready]
        return out

    def finalize(self) -> bytes:
        """Validate and strip the padding from the held-back block.

        Raises
        ------
        AlreadyFinalizedError
            If :meth:`finalize` was already called.
        EmptyInputError, NotFullBlocksError, BadPaddingError
            If the stream is empty, misaligned or badly padded.
        UnpaddingError
            Instead of the above, when *opaque_errors* is set.
        """
        if self._buffer is None:
            raise AlreadyFinalizedError("Context was already finalized.")
        buffer, self._buffer = self._buffer, None
        try:
            return bytes(unpad(buffer, self._block_size))
        except InvalidBlockSizeError:
            raise
        except PaddingError as exc:
            if not self._opaque_errors:
                raise
            raise _opaque(exc) from exc


class PKCS7:
    """PKCS #7 padding bound to a fixed block size.

    Parameters
    ----------
    block_size : int
        Block size in bytes (1-255). The caller chooses it, typically the
        cipher's block length (16 for AES, 8 for 3DES).
    opaque_errors : bool
        When ``True``, every unpad failure other than an invalid block size
        is raised as a single :class:`UnpaddingError` with a fixed message.
        Use this when unpadding attacker-controlled ciphertext.

    Raises
    ------
    InvalidBlockSizeError
        If *block_size* is out of range.
    """

    def __init__(self, block_size: int, *, opaque_errors: bool = False) -> None:
        check_block_size(block_size)
        self.block_size = block_size
        self.opaque_errors = opaque_errors

    def __repr__(self) -> str:
        return f"PKCS7(block_size={self.block_size}, opaque_errors={self.opaque_errors})"

    def pad(self, data: bytes | bytearray | memoryview) -> bytes:
        """Return a padded copy of *data*."""
        return pad(data, self.block_size)

    def unpad(self, data: bytes | bytearray | memoryview) -> bytes | bytearray | memoryview:
        """Strip and validate padding; see :func:`pypkcs7.padding.unpad`."""
        try:
            return unpad(data, self.block_size)
        except InvalidBlockSizeError:
            raise
        except PaddingError as exc:
            if not self.opaque_errors:
                raise
            raise _opaque(exc) from exc

    def padder(self) -> Padder:
        """Return a new incremental :class:`Padder` for this block size."""
        return Padder(self.block_size)

    def unpadder(self) -> Unpadder:
        """Return a new incremental :class:`Unpadder` sharing *opaque_errors*."""
        return Unpadder(self.block_size, opaque_errors=self.opaque_errors)
