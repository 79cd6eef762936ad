#
# padfmt - Options Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import io

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from padfmt.flags import FormatFlags
from padfmt.options import AppendOptions


# Tests ----------------------------------------------------------------------------------------------------------------


class TestAppendOptions:
    @pytest.mark.parametrize(
        "options, pad_char, ellipsis",
        [
            pytest.param(AppendOptions(), " ", None, id="default"),
            pytest.param(AppendOptions.ascii(), " ", "...", id="ascii"),
            pytest.param(AppendOptions.unicode(), " ", "…", id="unicode"),
        ],
    )
    def test_presets(self, options, pad_char, ellipsis):
        assert options.pad_char == pad_char
        assert options.ellipsis == ellipsis

    def test_merge(self):
        """Replace selected fields and keep the rest."""
        merged = AppendOptions.ascii().merge(pad_char="_")
        assert merged == AppendOptions(pad_char="_", ellipsis="...")

    def test_merge_unknown_field(self):
        with pytest.raises(TypeError, match=r"unknown option\(s\): width"):
            AppendOptions().merge(width=3)

    @pytest.mark.parametrize(
        "kwargs, exc",
        [
            pytest.param({"pad_char": "ab"}, ValueError, id="pad-char-long"),
            pytest.param({"pad_char": None}, TypeError, id="pad-char-none"),
            pytest.param({"ellipsis": 3}, TypeError, id="ellipsis-int"),
        ],
    )
    def test_validation(self, kwargs, exc):
        with pytest.raises(exc):
            AppendOptions(**kwargs)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            AppendOptions().pad_char = "*"


class TestAppendOptionsAppend:
    @pytest.mark.parametrize(
        "options, expected",
        [
            pytest.param(AppendOptions(), "   Hello W", id="default"),
            pytest.param(AppendOptions.ascii(), "   Hell...", id="ascii"),
            pytest.param(AppendOptions.unicode(), "   Hello …", id="unicode"),
            pytest.param(AppendOptions(pad_char="*", ellipsis=".."), "***Hello..", id="custom"),
        ],
    )
    def test_forwards_fields(self, options, expected):
        """Use the preset pad character and ellipsis."""
        assert options.append("Hello World", io.StringIO(), width=10, precision=7).getvalue() == expected

    def test_left_justify_and_chaining(self):
        sink = io.StringIO()
        options = AppendOptions(pad_char=".")
        options.append("b", options.append("a", sink, FormatFlags.LEFT_JUSTIFY, 3), FormatFlags.LEFT_JUSTIFY, 3)
        assert sink.getvalue() == "a..b.."

    def test_ellipsis_longer_than_precision(self):
        with pytest.raises(ValueError, match=r"ellipsis length 3 exceeds precision 2"):
            AppendOptions.ascii().append("Hi", io.StringIO(), precision=2)
