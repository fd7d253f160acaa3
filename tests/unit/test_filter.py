"""
Unit tests for filter utilities.

This module contains tests for needs_quoting, format_filter_value,
encode_filters and the FilterClause model.
"""

import pytest
from pydantic import ValidationError

from scalepad_client.models.filter import FilterClause
from scalepad_client.utils.filter import encode_filters, format_filter_value, needs_quoting


class TestNeedsQuoting:
    """Test cases for needs_quoting function."""

    @pytest.mark.parametrize("value", ["a,b", "10:30", "Acme Inc", "this OR that", "AND"])
    def test_special_values_need_quoting(self, value):
        """Test values with separators or boolean words are quoted."""
        assert needs_quoting(value) is True

    @pytest.mark.parametrize("value", ["active", "ORDER", "BRAND", "ANDROID", "or", "2024-01-01"])
    def test_plain_values_do_not_need_quoting(self, value):
        """Test plain values and partial boolean words are left alone."""
        assert needs_quoting(value) is False

    def test_boolean_word_with_punctuation(self):
        """Test word boundaries include punctuation."""
        assert needs_quoting("x-OR-y") is True

    @pytest.mark.parametrize("value", ["éAND", "ORü", "ñORñ"])
    def test_non_ascii_letters_are_word_boundaries(self, value):
        """Test only ASCII letters and digits extend a boolean word."""
        assert needs_quoting(value) is True

    def test_ascii_letters_extend_boolean_word(self):
        """Test ASCII letters next to a boolean word suppress quoting."""
        assert needs_quoting("xANDy") is False


class TestFormatFilterValue:
    """Test cases for format_filter_value function."""

    def test_scalar_string(self):
        """Test scalar string."""
        assert format_filter_value("active") == "active"

    def test_scalar_string_with_space_is_quoted(self):
        """Test scalar string with space is quoted."""
        assert format_filter_value("Acme Inc") == '"Acme Inc"'

    def test_numbers(self):
        """Test numbers."""
        assert format_filter_value(42) == "42"
        assert format_filter_value(1.5) == "1.5"
        assert format_filter_value(3.0) == "3"

    def test_booleans(self):
        """Test booleans."""
        assert format_filter_value(True) == "true"
        assert format_filter_value(False) == "false"

    def test_list_joined_in_order(self):
        """Test list joined in order."""
        assert format_filter_value(["c", "a", "b"]) == "c,a,b"

    def test_list_elements_quoted_individually(self):
        """Test list elements quoted individually."""
        assert format_filter_value(["eu", "North America", "a,b"]) == 'eu,"North America","a,b"'

    def test_embedded_quotes_not_escaped(self):
        """Test embedded quotes not escaped."""
        assert format_filter_value('say "hi"') == '"say "hi""'


class TestEncodeFilters:
    """Test cases for encode_filters function."""

    def test_single_filter(self):
        """Test single filter."""
        params = encode_filters({"status": FilterClause(op="eq", value="active")})

        assert params == [("filter[status]", "eq: active")]

    def test_dotted_field_path(self):
        """Test dotted field path."""
        params = encode_filters({"client.name": FilterClause(op="eq", value="Acme Inc")})

        assert params == [("filter[client.name]", 'eq: "Acme Inc"')]

    def test_in_operator(self):
        """Test in operator."""
        params = encode_filters({"region": {"op": "in", "value": ["eu", "us"]}})

        assert params == [("filter[region]", "in: eu,us")]

    def test_comparison_operators(self):
        """Test comparison operators."""
        params = encode_filters(
            {
                "count": {"op": "gte", "value": 10},
                "price": {"op": "lt", "value": 9.99},
                "created_at": {"op": "gt", "value": "2024-01-01T00:00:00Z"},
            }
        )

        assert params == [
            ("filter[count]", "gte: 10"),
            ("filter[price]", "lt: 9.99"),
            ("filter[created_at]", 'gt: "2024-01-01T00:00:00Z"'),
        ]

    def test_insertion_order_preserved(self):
        """Test insertion order preserved."""
        filters = {
            "z": FilterClause(op="eq", value="1"),
            "a": FilterClause(op="eq", value="2"),
            "m": FilterClause(op="eq", value="3"),
        }

        keys = [key for key, _ in encode_filters(filters)]

        assert keys == ["filter[z]", "filter[a]", "filter[m]"]

    def test_boolean_value(self):
        """Test boolean value."""
        params = encode_filters({"is_active": {"op": "eq", "value": True}})

        assert params == [("filter[is_active]", "eq: true")]

    def test_empty_and_none(self):
        """Test empty and none."""
        assert encode_filters({}) == []
        assert encode_filters(None) == []

    def test_invalid_operator_rejected(self):
        """Test invalid operator rejected."""
        with pytest.raises(ValidationError):
            encode_filters({"status": {"op": "like", "value": "x"}})


class TestFilterClause:
    """Test cases for FilterClause value shape rules."""

    def test_in_requires_list(self):
        """Test in requires list."""
        with pytest.raises(ValidationError):
            FilterClause(op="in", value="eu")

    @pytest.mark.parametrize("op", ["eq", "lt", "lte", "gt", "gte"])
    def test_scalar_ops_reject_lists(self, op):
        """Test scalar ops reject lists."""
        with pytest.raises(ValidationError):
            FilterClause(op=op, value=["a", "b"])

    def test_scalar_types_preserved(self):
        """Test scalar types preserved."""
        assert FilterClause(op="eq", value=True).value is True
        assert FilterClause(op="eq", value=5).value == 5
        assert FilterClause(op="eq", value="5").value == "5"
