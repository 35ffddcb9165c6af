"""Tests for EnumOptions and option resolution."""

import pytest
from pydantic import ValidationError

from enum_lookup import EnumOptions, InvalidOptionsError, enum_value_by_key, resolve_options, to_enum_value
from enum_lookup.models.options import DEFAULT_OPTIONS


class TestEnumOptions:
    """Tests for the options model."""

    def test_defaults(self):
        options = EnumOptions()
        assert options.normalize is None
        assert options.ignore_case is False
        assert options.convert is False
        assert options.converter is None

    def test_camel_case_aliases(self):
        options = EnumOptions(ignoreCase=True)
        assert options.ignore_case is True

    def test_frozen(self):
        options = EnumOptions()
        with pytest.raises(ValidationError):
            options.ignore_case = True

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            EnumOptions(case_sensitive=True)


class TestResolveOptions:
    """Tests for resolve_options."""

    def test_none_gives_shared_defaults(self):
        assert resolve_options() is DEFAULT_OPTIONS
        assert resolve_options(None) is DEFAULT_OPTIONS

    def test_instance_returned_unchanged(self):
        options = EnumOptions(convert=True)
        assert resolve_options(options) is options

    def test_mapping_with_either_spelling(self):
        assert resolve_options({"ignore_case": True}).ignore_case is True
        assert resolve_options({"ignoreCase": True}).ignore_case is True

    def test_keyword_overrides_win(self):
        resolved = resolve_options(EnumOptions(convert=True, ignore_case=True), ignore_case=False)
        assert resolved.convert is True
        assert resolved.ignore_case is False

    def test_overrides_on_mapping(self):
        resolved = resolve_options({"convert": False}, convert=True)
        assert resolved.convert is True

    def test_hooks_preserved(self):
        def normalize(value):
            return value

        resolved = resolve_options(EnumOptions(normalize=normalize), convert=True)
        assert resolved.normalize is normalize

    def test_unknown_option_name(self):
        with pytest.raises(InvalidOptionsError):
            resolve_options(case_sensitive=True)

    def test_non_callable_hook(self):
        with pytest.raises(InvalidOptionsError):
            resolve_options(normalize="strip")

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError, match="got list"):
            resolve_options(["convert"])

    def test_invalid_options_error_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_options({"converter": 5})


class TestOptionsInLookups:
    """Every spelling of options reaches the lookups."""

    def test_instance(self, string_enum):
        assert enum_value_by_key(string_enum, "fruit", EnumOptions(ignore_case=True)) == "Apple"

    def test_mapping(self, string_enum):
        assert enum_value_by_key(string_enum, "fruit", {"ignoreCase": True}) == "Apple"

    def test_keywords(self, numeric_enum):
        assert to_enum_value(numeric_enum, "3", convert=True) == 3

    def test_invalid_options_raise_before_scanning(self, numeric_enum):
        with pytest.raises(InvalidOptionsError):
            to_enum_value(numeric_enum, "3", {"convert": True, "fuzzy": True})
