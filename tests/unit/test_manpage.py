"""
Tests for the manual-page summary helpers.
"""

from unittest.mock import MagicMock, patch

from proglist_py.manpage import capitalize_first, lookup_summary, strip_summary


class TestStripSummary:
    def test_strips_name_and_section(self) -> None:
        assert strip_summary("foo (1) - Does a thing") == "Does a thing"

    def test_splits_on_last_separator(self) -> None:
        assert strip_summary("foo (1) - a - b") == "b"

    def test_hyphenated_words_are_kept(self) -> None:
        line = "ls (1) - list non-hidden files"
        assert strip_summary(line) == "list non-hidden files"

    def test_without_separator(self) -> None:
        assert strip_summary("  just text ") == "just text"


class TestCapitalizeFirst:
    def test_capitalizes(self) -> None:
        assert capitalize_first("does a thing") == "Does a thing"

    def test_rest_is_untouched(self) -> None:
        assert capitalize_first("gNU awk") == "GNU awk"

    def test_empty(self) -> None:
        assert capitalize_first("") == ""


@patch("proglist_py.manpage.subprocess.run")
def test_lookup_summary_first_match_wins(mock_run: MagicMock) -> None:
    mock_run.return_value = MagicMock(
        returncode=0,
        stdout="printf (1) - format and print data\n"
        "printf (3) - formatted output conversion\n",
    )
    assert lookup_summary("printf") == "printf (1) - format and print data"
    mock_run.assert_called_once_with(
        ["whatis", "--", "printf"], capture_output=True, text=True, check=False
    )


@patch("proglist_py.manpage.subprocess.run")
def test_lookup_summary_custom_command(mock_run: MagicMock) -> None:
    mock_run.return_value = MagicMock(returncode=0, stdout="ls (1) - list\n")
    lookup_summary("ls", ("man", "-f"))
    args, _ = mock_run.call_args
    assert args[0] == ["man", "-f", "--", "ls"]


@patch("proglist_py.manpage.subprocess.run")
def test_lookup_summary_nothing_appropriate(mock_run: MagicMock) -> None:
    mock_run.return_value = MagicMock(
        returncode=16, stdout="", stderr="frob: nothing appropriate.\n"
    )
    assert lookup_summary("frob") == ""


@patch("proglist_py.manpage.subprocess.run")
def test_lookup_summary_tool_missing(mock_run: MagicMock) -> None:
    mock_run.side_effect = FileNotFoundError
    assert lookup_summary("ls") == ""


@patch("proglist_py.manpage.subprocess.run")
def test_lookup_summary_dash_name_is_not_an_option(mock_run: MagicMock) -> None:
    mock_run.return_value = MagicMock(returncode=16, stdout="")
    assert lookup_summary("--help") == ""
    args, _ = mock_run.call_args
    assert args[0] == ["whatis", "--", "--help"]
