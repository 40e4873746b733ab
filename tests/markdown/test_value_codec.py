"""Tests for converting property values to and from their string form."""

from datetime import date

import pytest

from note_creator.markdown.schemas import FrontmatterType
from note_creator.markdown.value_codec import (
    parse_number,
    split_list,
    stringify_value,
    to_field_string,
    to_frontmatter_value,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("3", 3),
        ("-12", -12),
        ("2.5", 2.5),
        ("3.0", 3),
        (" 42 ", 42),
        ("1e3", 1000),
        ("", 0),
        ("abc", 0),
        ("12abc", 0),
        ("nan", 0),
        ("inf", 0),
    ],
)
def test_parse_number(value, expected):
    result = parse_number(value)
    assert result == expected
    assert type(result) is type(expected)


def test_checkbox_values():
    assert to_frontmatter_value("true", FrontmatterType.CHECKBOX) is True
    assert to_frontmatter_value("1", FrontmatterType.CHECKBOX) is True
    assert to_frontmatter_value("True", FrontmatterType.CHECKBOX) is False
    assert to_frontmatter_value("yes", FrontmatterType.CHECKBOX) is False
    assert to_frontmatter_value("", FrontmatterType.CHECKBOX) is False


@pytest.mark.parametrize(
    "field_type", [FrontmatterType.MULTITEXT, FrontmatterType.ALIASES, FrontmatterType.TAGS]
)
def test_list_values(field_type):
    assert to_frontmatter_value("alpha, beta ,gamma", field_type) == ["alpha", "beta", "gamma"]
    assert to_frontmatter_value("a,,a, ", field_type) == ["a", "a"]
    assert to_frontmatter_value("", field_type) == []


@pytest.mark.parametrize(
    "field_type", [FrontmatterType.TEXT, FrontmatterType.DATE, FrontmatterType.DATETIME]
)
def test_text_values_pass_through(field_type):
    assert to_frontmatter_value(" as is: yes ", field_type) == " as is: yes "


def test_number_value():
    assert to_frontmatter_value("7", FrontmatterType.NUMBER) == 7
    assert to_frontmatter_value("seven", FrontmatterType.NUMBER) == 0


def test_split_list_drops_empty_items():
    assert split_list(" , ,") == []


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (3.0, "3"),
        (2.5, "2.5"),
        ("text", "text"),
        (date(2024, 1, 15), "2024-01-15"),
        (["a", "b", 3], "a,b,3"),
        ([], ""),
    ],
)
def test_stringify_value(value, expected):
    assert stringify_value(value) == expected


@pytest.mark.parametrize(
    "value,field_type",
    [
        ("4", FrontmatterType.NUMBER),
        ("2.5", FrontmatterType.NUMBER),
        ("true", FrontmatterType.CHECKBOX),
        ("false", FrontmatterType.CHECKBOX),
        ("a,b,c", FrontmatterType.MULTITEXT),
        ("x,y", FrontmatterType.TAGS),
        ("2024-01-15", FrontmatterType.DATE),
        ("hello", FrontmatterType.TEXT),
    ],
)
def test_string_form_survives_conversion(value, field_type):
    assert to_field_string(to_frontmatter_value(value, field_type), field_type) == value


def test_to_field_string_normalizes_lists():
    typed = to_frontmatter_value("alpha, beta ,gamma", FrontmatterType.MULTITEXT)
    assert to_field_string(typed, FrontmatterType.MULTITEXT) == "alpha,beta,gamma"
