"""Codec configuration for pypkcs7."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from pypkcs7.codec import PKCS7
from pypkcs7.exceptions import InvalidBlockSizeError, Pkcs7ConfigError
from pypkcs7.padding import check_block_size

_logger = logging.getLogger(__name__)


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    _logger.debug("Unrecognised boolean %s=%r; using default %s", name, value, default)
    return default


@dataclasses.dataclass(frozen=True)
class Pkcs7Config:
    """Codec configuration.

    Parameters
    ----------
    block_size : int
        Block size in bytes (1-255). There is no default: it depends on
        the cipher the caller pairs the padding with.
    opaque_errors : bool
        Collapse unpad failures into a single generic error.
    """

    block_size: int
    opaque_errors: bool = False

    def __post_init__(self) -> None:
        try:
            check_block_size(self.block_size)
        except InvalidBlockSizeError as exc:
            raise Pkcs7ConfigError(f"block_size: {exc}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> Pkcs7Config:
        """Create configuration from environment variables.

        Reads ``PKCS7_BLOCK_SIZE`` and ``PKCS7_OPAQUE_ERRORS``. Explicit
        keyword arguments override environment values.

        Raises
        ------
        Pkcs7ConfigError
            If no block size is available or it is not a valid integer.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "block_size" not in overrides:
            raw = env.get("PKCS7_BLOCK_SIZE")
            if raw is None:
                raise Pkcs7ConfigError("PKCS7_BLOCK_SIZE is not set")
            try:
                config_kwargs["block_size"] = int(raw.strip())
            except ValueError as exc:
                raise Pkcs7ConfigError(f"PKCS7_BLOCK_SIZE must be an integer (got {raw!r})") from exc

        if "opaque_errors" not in overrides:
            config_kwargs["opaque_errors"] = _env_bool(
                "PKCS7_OPAQUE_ERRORS",
                env.get("PKCS7_OPAQUE_ERRORS"),
                False,
            )

        config_kwargs.update(overrides)
        config = cls(**config_kwargs)
        _logger.debug(
            "Loaded padding config block_size=%d opaque_errors=%s",
            config.block_size,
            config.opaque_errors,
        )
        return config

    def codec(self) -> PKCS7:
        """Build a :class:`~pypkcs7.codec.PKCS7` from this configuration."""
        return PKCS7(self.block_size, opaque_errors=self.opaque_errors)
