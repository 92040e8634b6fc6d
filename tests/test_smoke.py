from __future__ import annotations

import importlib

import pytest


@pytest.mark.unit
def test_import_package() -> None:
    importlib.import_module("utckit")


@pytest.mark.unit
def test_import_cli_main() -> None:
    importlib.import_module("utckit.cli.main")


@pytest.mark.unit
def test_public_names_resolve() -> None:
    utckit = importlib.import_module("utckit")
    for name in utckit.__all__:
        assert hasattr(utckit, name), name
