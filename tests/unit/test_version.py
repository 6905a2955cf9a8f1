"""Tests for the version lookup."""

from importlib.metadata import PackageNotFoundError, version

import pytest

import eql
from eql import _version
from eql._version import UNKNOWN_VERSION, get_version


def test_version_comes_from_metadata() -> None:
    assert get_version() == version("eql")
    assert eql.__version__ == get_version()


def test_not_installed(monkeypatch: pytest.MonkeyPatch) -> None:
    def _missing(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr(_version, "version", _missing)
    assert get_version() == UNKNOWN_VERSION
