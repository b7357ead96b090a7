"""pytest plugin for craftitem-snbt.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from craftitem_snbt import NormalizerConfig, normalize
from craftitem_snbt.codec.converter import SNBTConverter
from craftitem_snbt.tree.normalizer import Translator


@pytest.fixture(scope="session")
def assert_snbt() -> Any:
    """Fixture that returns a callable SNBT output asserter.

    The fixture is session-scoped because the returned callable is stateless
    (it builds a fresh Normalizer and SNBTConverter per call).

    Usage in tests::

        def test_item_name(assert_snbt):
            assert_snbt({"display": {"Name": "Sword"}}, "{display:{Name:Sword}}")

        def test_component(assert_snbt):
            assert_snbt({"max_stack_size": 16}, "[max_stack_size=16]",
                        use_bracket_form=True)

    Returns:
        A callable ``_assert(raw, expected, translator=None,
        use_bracket_form=False, config=None) -> None`` that raises
        ``AssertionError`` when the rendered SNBT differs from ``expected``.
    """

    def _assert(
        raw: Any,
        expected: str,
        translator: Translator | None = None,
        use_bracket_form: bool = False,
        config: NormalizerConfig | None = None,
    ) -> None:
        """Assert that ``raw`` normalizes and renders to ``expected``.

        Raises:
            AssertionError: When the SNBT text differs, with a message that
                includes the raw input, the typed tree and both strings.
        """
        typed = normalize(raw, translator, config)
        actual = SNBTConverter().convert(typed, use_bracket_form)
        if actual != expected:
            raise AssertionError(
                f"SNBT output mismatch:\n"
                f"  raw:      {raw!r}\n"
                f"  typed:    {typed!r}\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert
