"""Unit tests for Rich console helpers."""

import pytest
from lsicons.utils.formatting import print_error, print_listing_line


class TestPrintListingLine:
    """Tests for print_listing_line."""

    def test_prints_line_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_listing_line("x [bold]name[/bold] :thumbs_up: 1234")

        captured = capsys.readouterr()
        assert captured.out == "x [bold]name[/bold] :thumbs_up: 1234\n"
        assert captured.err == ""

    @pytest.mark.parametrize(
        "line", ["x a\tb", "x c\rd", "x g\x07h", "x \x1b[31mred", "x trailing "]
    )
    def test_control_characters_kept(self, line: str, capsys: pytest.CaptureFixture[str]) -> None:
        print_listing_line(line)

        assert capsys.readouterr().out == f"{line}\n"


class TestPrintError:
    """Tests for print_error."""

    def test_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("Could not open 'x': No such file or directory")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Could not open 'x': No such file or directory" in captured.err

    def test_message_is_escaped(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("Could not open '[dim]x': boom")

        assert "'[dim]x'" in capsys.readouterr().err
