#
# Prettydump - Options Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from prettydump.options import (
    PrettyOptions,
    configure,
    get_options,
    humanize,
    indent_width,
    newline_after_items,
    output_prefix,
    reset,
    set_humanize,
    set_indent_width,
    set_newline_after_items,
    set_options,
    set_output_prefix,
    using,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPrettyOptions:
    def test_defaults(self):
        """Default options render structured output with a four-space indent."""
        opts = PrettyOptions()
        assert opts.indent == 4
        assert opts.humanize is False
        assert opts.prefix == ""
        assert opts.newline_after_items is False
        assert opts.include_private is False
        assert opts.fully_qualified is False

    def test_frozen(self):
        """Options are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            PrettyOptions().indent = 2

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            pytest.param({"indent": 0}, ValueError, id="zero-indent"),
            pytest.param({"indent": -2}, ValueError, id="negative-indent"),
            pytest.param({"indent": "4"}, TypeError, id="str-indent"),
            pytest.param({"indent": True}, TypeError, id="bool-indent"),
            pytest.param({"prefix": None}, TypeError, id="none-prefix"),
            pytest.param({"humanize": 1}, TypeError, id="int-flag"),
            pytest.param({"fully_qualified": "yes"}, TypeError, id="str-flag"),
        ],
    )
    def test_validation(self, kwargs, error):
        """Invalid attribute values are rejected."""
        with pytest.raises(error):
            PrettyOptions(**kwargs)

    def test_merge(self):
        """merge() returns a modified copy."""
        opts = PrettyOptions()
        merged = opts.merge(indent=2, humanize=True)
        assert merged == PrettyOptions(indent=2, humanize=True)
        assert opts == PrettyOptions()

    def test_merge_unknown(self):
        """merge() rejects unknown attribute names."""
        with pytest.raises(TypeError, match="colour"):
            PrettyOptions().merge(colour=True)


class TestPresets:
    @pytest.mark.parametrize(
        "preset, expected",
        [
            pytest.param("default", PrettyOptions(), id="default"),
            pytest.param("compact", PrettyOptions(indent=2), id="compact"),
            pytest.param("debug", PrettyOptions(include_private=True, fully_qualified=True), id="debug"),
            pytest.param("human", PrettyOptions(humanize=True, newline_after_items=True), id="human"),
        ],
    )
    def test_from_preset(self, preset, expected):
        """Named presets map to fixed options."""
        assert PrettyOptions.from_preset(preset) == expected

    def test_unknown_preset(self):
        """Unknown presets raise ValueError listing the valid names."""
        with pytest.raises(ValueError, match="compact"):
            PrettyOptions.from_preset("fancy")


class TestConfigure:
    def test_incremental(self):
        """Calls without a preset build on the current default."""
        configure(indent=2)
        configure(humanize=True)
        assert get_options() == PrettyOptions(indent=2, humanize=True)

    def test_preset_replaces(self):
        """A preset replaces the current default before merging."""
        configure(indent=2)
        opts = configure(preset="human", prefix="> ")
        assert opts == PrettyOptions(humanize=True, newline_after_items=True, prefix="> ")
        assert get_options() is opts

    def test_invalid_value_keeps_default(self):
        """A rejected update leaves the default untouched."""
        with pytest.raises(ValueError):
            configure(indent=0)
        assert get_options() == PrettyOptions()

    def test_reset(self):
        """reset() restores the built-in default."""
        configure(preset="debug")
        assert reset() == PrettyOptions()
        assert get_options() == PrettyOptions()

    def test_set_options_type(self):
        """set_options() only accepts PrettyOptions."""
        with pytest.raises(TypeError):
            set_options({"indent": 2})


class TestUsing:
    def test_restores(self):
        """The previous default is restored on exit."""
        with using(humanize=True) as opts:
            assert opts.humanize is True
            assert get_options() is opts
        assert get_options() == PrettyOptions()

    def test_restores_on_error(self):
        """The previous default is restored when the block raises."""
        with pytest.raises(RuntimeError):
            with using(PrettyOptions.compact()):
                raise RuntimeError("boom")
        assert get_options() == PrettyOptions()

    def test_options_and_overrides(self):
        """Keyword overrides are merged over the given options."""
        with using(PrettyOptions.compact(), prefix="# ") as opts:
            assert opts == PrettyOptions(indent=2, prefix="# ")


class TestAccessors:
    @pytest.mark.parametrize(
        "getter, setter, value",
        [
            pytest.param(indent_width, set_indent_width, 2, id="indent"),
            pytest.param(humanize, set_humanize, True, id="humanize"),
            pytest.param(output_prefix, set_output_prefix, "> ", id="prefix"),
            pytest.param(newline_after_items, set_newline_after_items, True, id="newline-after-items"),
        ],
    )
    def test_round_trip(self, getter, setter, value):
        """Each setter updates what its getter returns."""
        setter(value)
        assert getter() == value

    def test_setters_keep_other_options(self):
        """Setters change one attribute only."""
        set_humanize(True)
        set_indent_width(2)
        assert get_options() == PrettyOptions(indent=2, humanize=True)
