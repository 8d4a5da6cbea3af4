"""pypkcs7 - PKCS #7 block padding for block-cipher plaintexts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pypkcs7")
except PackageNotFoundError:
    __version__ = "0+local"
from pypkcs7._constants import MAX_BLOCK_SIZE, MIN_BLOCK_SIZE
from pypkcs7.codec import PKCS7, Padder, Unpadder
from pypkcs7.config import Pkcs7Config
from pypkcs7.exceptions import (
    AlreadyFinalizedError,
    BadPaddingError,
    EmptyInputError,
    InvalidBlockSizeError,
    NotFullBlocksError,
    PaddingError,
    PaddingErrorKind,
    Pkcs7ConfigError,
    Pkcs7Error,
    UnpaddingError,
)
from pypkcs7.padding import check_block_size, pad, pad_into, unpad

__all__ = [
    "__version__",
    "AlreadyFinalizedError",
    "BadPaddingError",
    "EmptyInputError",
    "InvalidBlockSizeError",
    "MAX_BLOCK_SIZE",
    "MIN_BLOCK_SIZE",
    "NotFullBlocksError",
    "PKCS7",
    "Padder",
    "PaddingError",
    "PaddingErrorKind",
    "Pkcs7Config",
    "Pkcs7ConfigError",
    "Pkcs7Error",
    "UnpaddingError",
    "Unpadder",
    "check_block_size",
    "pad",
    "pad_into",
    "unpad",
]
