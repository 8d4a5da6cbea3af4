from __future__ import annotations

import pytest

from pypkcs7.codec import PKCS7
from pypkcs7.config import Pkcs7Config
from pypkcs7.exceptions import Pkcs7ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PKCS7_BLOCK_SIZE", raising=False)
    monkeypatch.delenv("PKCS7_OPAQUE_ERRORS", raising=False)


def test_config_validates_block_size() -> None:
    with pytest.raises(Pkcs7ConfigError, match="block_size"):
        Pkcs7Config(block_size=0)


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PKCS7_BLOCK_SIZE", " 16 ")
    monkeypatch.setenv("PKCS7_OPAQUE_ERRORS", "yes")
    config = Pkcs7Config.from_env()
    assert config == Pkcs7Config(block_size=16, opaque_errors=True)


def test_from_env_requires_block_size() -> None:
    with pytest.raises(Pkcs7ConfigError, match="PKCS7_BLOCK_SIZE is not set"):
        Pkcs7Config.from_env()


def test_from_env_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PKCS7_BLOCK_SIZE", "sixteen")
    with pytest.raises(Pkcs7ConfigError, match="must be an integer"):
        Pkcs7Config.from_env()


def test_from_env_rejects_out_of_range(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PKCS7_BLOCK_SIZE", "256")
    with pytest.raises(Pkcs7ConfigError):
        Pkcs7Config.from_env()


def test_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PKCS7_BLOCK_SIZE", "16")
    monkeypatch.setenv("PKCS7_OPAQUE_ERRORS", "1")
    config = Pkcs7Config.from_env(block_size=8, opaque_errors=False)
    assert config.block_size == 8
    assert config.opaque_errors is False


def test_unrecognised_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PKCS7_OPAQUE_ERRORS", "maybe")
    config = Pkcs7Config.from_env(block_size=16)
    assert config.opaque_errors is False


def test_codec_from_config() -> None:
    codec = Pkcs7Config(block_size=8, opaque_errors=True).codec()
    assert isinstance(codec, PKCS7)
    assert codec.block_size == 8
    assert codec.opaque_errors is True
