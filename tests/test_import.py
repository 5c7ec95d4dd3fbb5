"""Verify package imports work correctly."""

import pytest


def test_import_tablero() -> None:
    """Test that tablero can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import tablero

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert tablero.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from tablero import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


@pytest.mark.parametrize("name", __import__("tablero").__all__)
def test_public_names_resolve(name: str) -> None:
    import tablero

    assert getattr(tablero, name) is not None
