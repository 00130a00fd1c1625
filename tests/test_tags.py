#
# Prettydump - Field Tags Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging

from dataclasses import dataclass

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from prettydump.tags import FieldDirective, TagOptions, is_empty_value, is_valid_tag, parse_tag


# Local Classes & Methods ----------------------------------------------------------------------------------------------

@dataclass
class Person:
    name: str = ""


# Tests ----------------------------------------------------------------------------------------------------------------

class TestParseTag:
    @pytest.mark.parametrize(
        "tag, name, options",
        [
            pytest.param("name", "name", "", id="name-only"),
            pytest.param("name,omitempty", "name", "omitempty", id="name-options"),
            pytest.param(",omitempty", "", "omitempty", id="options-only"),
            pytest.param("a,b,c", "a", "b,c", id="split-first-comma"),
            pytest.param("", "", "", id="empty"),
        ],
    )
    def test_split(self, tag, name, options):
        """Split at the first comma."""
        got_name, got_options = parse_tag(tag)
        assert got_name == name
        assert got_options == options
        assert isinstance(got_options, TagOptions)


class TestTagOptions:
    @pytest.mark.parametrize(
        "options, flag, expected",
        [
            pytest.param("omitempty", "omitempty", True, id="single"),
            pytest.param("string,omitempty", "omitempty", True, id="last"),
            pytest.param("omitempty,string", "omitempty", True, id="first"),
            pytest.param("omitemptyx", "omitempty", False, id="prefix-match"),
            pytest.param("xomitempty", "omitempty", False, id="suffix-match"),
            pytest.param("", "omitempty", False, id="empty"),
        ],
    )
    def test_contains(self, options, flag, expected):
        """Match whole comma-delimited flags only."""
        assert TagOptions(options).contains(flag) is expected


class TestIsValidTag:
    @pytest.mark.parametrize(
        "name, expected",
        [
            pytest.param("Name", True, id="letters"),
            pytest.param("Full Name", True, id="space"),
            pytest.param("Größe", True, id="unicode-letters"),
            pytest.param("Disk 2 (GB)", True, id="digits-parens"),
            pytest.param("a-b_c.d:e/f", True, id="punctuation"),
            pytest.param("!#$%&()*+-./:<=>?@[]^_{|}~", True, id="all-punctuation"),
            pytest.param("", False, id="empty"),
            pytest.param('say "hi"', False, id="double-quote"),
            pytest.param("it's", False, id="single-quote"),
            pytest.param("a\\b", False, id="backslash"),
            pytest.param("tab\there", False, id="tab"),
        ],
    )
    def test_names(self, name, expected):
        """Allow letters, digits, space and a fixed punctuation set."""
        assert is_valid_tag(name) is expected


class TestFieldDirective:
    @pytest.mark.parametrize(
        "tag, expected",
        [
            pytest.param(None, FieldDirective(), id="none"),
            pytest.param("", FieldDirective(), id="empty"),
            pytest.param("-", FieldDirective(skip=True), id="skip"),
            pytest.param("Full Name", FieldDirective(name="Full Name"), id="rename"),
            pytest.param("Name,omitempty", FieldDirective(name="Name", omitempty=True), id="rename-omitempty"),
            pytest.param(",omitempty", FieldDirective(omitempty=True), id="omitempty-only"),
            pytest.param("-,omitempty", FieldDirective(name="-", omitempty=True), id="dash-name"),
        ],
    )
    def test_from_tag(self, tag, expected):
        """Parse skip, rename and omitempty directives."""
        assert FieldDirective.from_tag(tag) == expected

    def test_invalid_name_falls_back(self, caplog):
        """Invalid display names are dropped and reported at debug level."""
        caplog.set_level(logging.DEBUG, logger="prettydump.tags")
        directive = FieldDirective.from_tag('bad"name,omitempty')
        assert directive == FieldDirective(omitempty=True)
        assert "bad\"name" in caplog.text


class TestIsEmptyValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(None, True, id="none"),
            pytest.param("", True, id="empty-str"),
            pytest.param(b"", True, id="empty-bytes"),
            pytest.param([], True, id="empty-list"),
            pytest.param((), True, id="empty-tuple"),
            pytest.param(set(), True, id="empty-set"),
            pytest.param({}, True, id="empty-dict"),
            pytest.param(frozendict(), True, id="empty-frozendict"),
            pytest.param(0, False, id="zero"),
            pytest.param(0.0, False, id="zero-float"),
            pytest.param(False, False, id="false"),
            pytest.param(Person(), False, id="zero-record"),
            pytest.param("x", False, id="str"),
            pytest.param([None], False, id="list-of-none"),
        ],
    )
    def test_values(self, value, expected):
        """Only absent values and empty containers are empty."""
        assert is_empty_value(value) is expected
