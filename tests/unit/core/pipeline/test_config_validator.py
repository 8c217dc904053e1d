from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.
"""

import pytest

from mdnav.core.pipeline.validator import validate_config
from mdnav.domain.config import get_default_config


def test_empty_config_gets_defaults() -> None:
    clean, warnings = validate_config({})

    assert warnings == []
    assert clean["extension"] == ".md"
    assert clean["prune_hidden"] is True
    assert clean["sort_entries"] is True
    assert clean["json_indent"] == 2


def test_non_dict_config_falls_back() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean == get_default_config()
    assert warnings


def test_non_dict_config_strict_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_bool_coercion() -> None:
    clean, warnings = validate_config({"prune_hidden": "no", "print_tree": 1})

    assert clean["prune_hidden"] is False
    assert clean["print_tree"] is True
    assert len(warnings) == 2


def test_invalid_bool_uses_fallback() -> None:
    clean, warnings = validate_config({"sort_entries": "maybe"})

    assert clean["sort_entries"] is True
    assert any("sort_entries" in w for w in warnings)


def test_extension_gets_leading_dot() -> None:
    clean, warnings = validate_config({"extension": "rst"})

    assert clean["extension"] == ".rst"
    assert warnings


@pytest.mark.parametrize("bad", [".", ".tar.gz", "./md"])
def test_malformed_extension_replaced(bad: str) -> None:
    clean, _ = validate_config({"extension": bad})
    assert clean["extension"] == ".md"


def test_extension_strict_raises() -> None:
    with pytest.raises(ValueError):
        validate_config({"extension": "md"}, strict=True)


def test_indent_coercion() -> None:
    assert validate_config({"json_indent": "4"})[0]["json_indent"] == 4
    assert validate_config({"json_indent": -1})[0]["json_indent"] == 2
    assert validate_config({"json_indent": 0})[0]["json_indent"] == 0


def test_indent_strict_rejects_strings() -> None:
    with pytest.raises(TypeError):
        validate_config({"json_indent": "4"}, strict=True)


def test_blank_strings_use_fallback() -> None:
    clean, _ = validate_config({"output_file": "   "})
    assert clean["output_file"] == ""
