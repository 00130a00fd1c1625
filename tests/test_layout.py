#
# Prettydump - Layout Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import io

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from prettydump.layout import IndentWriter, TabWriter, align_cells, indent


# Tests ----------------------------------------------------------------------------------------------------------------

class TestAlignCells:
    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("no tabs\nat all", "no tabs\nat all", id="passthrough"),
            pytest.param("a:\t1\nlong:\t2\n", "a:    1\nlong: 2\n", id="column"),
            pytest.param("\tx\n\tyy\n", "    x\n    yy\n", id="minwidth-indent"),
            pytest.param("a:\t1\nplain\nbbbb:\t2\n", "a:  1\nplain\nbbbb: 2\n", id="block-break"),
            pytest.param("k:\t\n", "k:\n", id="trailing-padding-trimmed"),
            pytest.param("\t\n", "\n", id="blank-indented-line"),
            pytest.param("\tk:\t\n", "    k:\n", id="nested-trailing-trim"),
            pytest.param("\ta:\t1\n\tbb:\t2", "    a:  1\n    bb: 2", id="two-columns"),
            pytest.param("", "", id="empty"),
        ],
    )
    def test_alignment(self, text, expected):
        """Pad cells to the widest cell of their column block."""
        assert align_cells(text, minwidth=4) == expected

    def test_padding(self):
        """Padding is added to the widest cell."""
        assert align_cells("ab\tx\n", minwidth=0, padding=3) == "ab   x\n"

    def test_nested_blocks(self):
        """A longer row opens an inner block without breaking the outer one."""
        text = "a\tb\n" "aa\tbbbb\tc\n" "a\tb\n"
        assert align_cells(text, minwidth=0) == "a  b\naa bbbb c\na  b\n"


class TestTabWriter:
    def test_buffers_until_flush(self):
        """Nothing reaches the output before flush()."""
        buf = io.StringIO()
        tw = TabWriter(buf, minwidth=4)
        assert tw.write("a:\t1\n") == 5
        assert buf.getvalue() == ""
        tw.flush()
        assert buf.getvalue() == "a:  1\n"

    def test_flush_clears_buffer(self):
        """Each flush aligns only text written since the last one."""
        buf = io.StringIO()
        tw = TabWriter(buf, minwidth=1)
        tw.write("long:\t1\n")
        tw.flush()
        tw.write("a:\t2\n")
        tw.flush()
        assert buf.getvalue() == "long: 1\na: 2\n"

    def test_empty_flush(self):
        """Flushing an empty buffer writes nothing."""
        buf = io.StringIO()
        TabWriter(buf).flush()
        assert buf.getvalue() == ""


class TestIndentWriter:
    def test_prefix_every_line(self):
        """Blank lines are prefixed too."""
        buf = io.StringIO()
        IndentWriter(buf, "> ").write("a\n\nb\n")
        assert buf.getvalue() == "> a\n> \n> b\n"

    def test_lazy_prefix_across_writes(self):
        """A line split across writes is prefixed once."""
        buf = io.StringIO()
        writer = IndentWriter(buf, "\t")
        writer.write("a")
        writer.write("b\nc")
        writer.write("\n")
        assert buf.getvalue() == "\tab\n\tc\n"

    def test_no_dangling_prefix(self):
        """A trailing newline leaves no prefix behind."""
        buf = io.StringIO()
        IndentWriter(buf, "\t").write("a\n")
        assert buf.getvalue() == "\ta\n"


class TestIndent:
    @pytest.mark.parametrize(
        "text, prefix, expected",
        [
            pytest.param("", "> ", "", id="empty"),
            pytest.param("a", "> ", "> a", id="single-line"),
            pytest.param("a\nb\n", "> ", "> a\n> b\n", id="multi-line"),
            pytest.param("a\n\nb", "  ", "  a\n  \n  b", id="blank-line"),
            pytest.param("\n", "#", "#\n", id="only-newline"),
            pytest.param("a\nb", "", "a\nb", id="empty-prefix"),
        ],
    )
    def test_indent(self, text, prefix, expected):
        """Prefix is applied verbatim to every line."""
        assert indent(text, prefix) == expected
