import pytest

from xutilkit.cmdline import (
    CommandParseError,
    OptionDesc,
    OptionKind,
    ParsedCommand,
    parse_command,
)

OPTIONS = [
    OptionDesc("-bg", "*background", OptionKind.SEP_ARG),
    OptionDesc("-D", ".define", OptionKind.STICKY_ARG),
    OptionDesc("-e", ".exec", OptionKind.SKIP_LINE),
    OptionDesc("-fg", "*foreground", OptionKind.SEP_ARG),
    OptionDesc("-fn", "*font", OptionKind.SEP_ARG),
    OptionDesc("-geometry", ".geometry", OptionKind.SEP_ARG),
    OptionDesc("-iconic", ".iconic", OptionKind.NO_ARG, "on"),
    OptionDesc("-keep", ".keep", OptionKind.SKIP_ARG),
    OptionDesc("-n2", ".n2", OptionKind.SKIP_N_ARGS, 2),
    OptionDesc("-xrm", None, OptionKind.RES_ARG),
    OptionDesc("=", ".geometry", OptionKind.IS_ARG),
]


def parse(*args):
    return parse_command(OPTIONS, "app", ["app", *args])


def test_separate_argument():
    result = parse("-geometry", "80x24")
    assert result.resources == {"app.geometry": "80x24"}
    assert result.argv == ["app"]


def test_no_arg_uses_table_value():
    assert parse("-iconic").resources == {"app.iconic": "on"}


def test_unambiguous_abbreviation():
    assert parse("-geo", "10x10").resources == {"app.geometry": "10x10"}


def test_ambiguous_abbreviation_left_in_argv():
    result = parse("-f", "red")
    assert result.resources == {}
    assert result.argv == ["app", "-f", "red"]


def test_sticky_argument():
    assert parse("-Dfoo=1").resources == {"app.define": "foo=1"}


def test_is_arg_stores_whole_argument():
    assert parse("=80x24").resources == {"app.geometry": "=80x24"}


def test_longer_argument_is_not_option():
    result = parse("-geometryx")
    assert result.resources == {}
    assert result.argv == ["app", "-geometryx"]


def test_sep_arg_missing_value_kept():
    result = parse("-fg")
    assert result.resources == {}
    assert result.argv == ["app", "-fg"]


def test_resource_line():
    result = parse("-xrm", "*Foo.bar:  baz")
    assert result.resources == {"*Foo.bar": "baz"}
    assert result.argv == ["app"]


def test_skip_arg_keeps_both():
    result = parse("-keep", "x", "-iconic")
    assert result.argv == ["app", "-keep", "x"]
    assert result.resources == {"app.iconic": "on"}


def test_skip_line_keeps_rest():
    result = parse("-iconic", "-e", "sh", "-bg", "blue")
    assert result.argv == ["app", "-e", "sh", "-bg", "blue"]
    assert result.resources == {"app.iconic": "on"}


def test_skip_n_args():
    result = parse("-n2", "a", "b", "-iconic")
    assert result.argv == ["app", "-n2", "a", "b"]
    assert result.resources == {"app.iconic": "on"}


def test_skip_n_args_truncated_at_end():
    assert parse("-n2", "a").argv == ["app", "-n2", "a"]


def test_unknown_arguments_preserved_in_order():
    result = parse("file1", "-bg", "black", "file2")
    assert result.argv == ["app", "file1", "file2"]
    assert result.resources == {"app*background": "black"}


def test_later_setting_overrides():
    assert parse("-bg", "red", "-bg", "green").resources == {
        "app*background": "green"
    }


def test_empty_argv():
    assert parse_command(OPTIONS, "app", []) == ParsedCommand()


def test_negative_skip_count_rejected():
    bad = [OptionDesc("-s", ".s", OptionKind.SKIP_N_ARGS, -1)]
    with pytest.raises(CommandParseError):
        parse_command(bad, "app", ["app", "-s"])


def test_unknown_kind_rejected():
    bad = [OptionDesc("-s", ".s", "bogus")]
    with pytest.raises(CommandParseError, match="unknown kind"):
        parse_command(bad, "app", ["app", "-s"])