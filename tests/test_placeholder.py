"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import craftitem_snbt

    assert craftitem_snbt.__version__ is not None
    assert craftitem_snbt.__version__ == "0.1.0"
