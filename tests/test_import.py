"""Verify package imports work correctly."""


def test_import_arithlex() -> None:
    """Test that arithlex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import arithlex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert arithlex.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from arithlex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Everything in __all__ is importable from the top-level package."""
    import arithlex

    for name in arithlex.__all__:
        assert hasattr(arithlex, name), name
