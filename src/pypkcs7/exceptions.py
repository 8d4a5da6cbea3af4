"""Custom exception hierarchy for pypkcs7."""

from __future__ import annotations

import enum

from pypkcs7._constants import MAX_BLOCK_SIZE, MIN_BLOCK_SIZE


class PaddingErrorKind(enum.StrEnum):
    """Closed set of failure categories reported by the padding codec."""

    INVALID_BLOCK_SIZE = "invalid_block_size"
    EMPTY_INPUT = "empty_input"
    NOT_FULL_BLOCKS = "not_full_blocks"
    BAD_PADDING = "bad_padding"
    OPAQUE = "opaque"


class Pkcs7Error(Exception):
    """Base exception for all pypkcs7 errors."""


class Pkcs7ConfigError(Pkcs7Error):
    """Invalid or missing configuration."""


class AlreadyFinalizedError(Pkcs7Error):
    """An incremental padder or unpadder was used after ``finalize()``."""


class PaddingError(Pkcs7Error, ValueError):
    """Padding or unpadding failed.

    Every subclass carries a fixed message and a :class:`PaddingErrorKind`.
    Messages never include any part of the buffer being processed.
    """

    kind: PaddingErrorKind
    default_message: str = "padding error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidBlockSizeError(PaddingError):
    """Block size outside the representable range."""

    kind = PaddingErrorKind.INVALID_BLOCK_SIZE
    default_message = f"invalid blocksize (valid sizes: b >= {MIN_BLOCK_SIZE} && b <= {MAX_BLOCK_SIZE})"


class EmptyInputError(PaddingError):
    """Unpad was given a zero-length buffer."""

    kind = PaddingErrorKind.EMPTY_INPUT
    default_message = "the given byte string is empty"


class NotFullBlocksError(PaddingError):
    """Unpad input length is not a multiple of the block size."""

    kind = PaddingErrorKind.NOT_FULL_BLOCKS
    default_message = "input not full blocks"


class BadPaddingError(PaddingError):
    """Trailing count byte or trailing run is inconsistent."""

    kind = PaddingErrorKind.BAD_PADDING
    default_message = "bad padding"


class UnpaddingError(PaddingError):
    """Generic unpad failure raised in opaque-error mode.

    Collapses :class:`EmptyInputError`, :class:`NotFullBlocksError` and
    :class:`BadPaddingError` into one indistinguishable failure.  The
    specific error is still available as ``__cause__`` for local
    diagnostics; it must not be reported to a remote peer.
    """

    kind = PaddingErrorKind.OPAQUE
    default_message = "unable to unpad data"
