"""Unit tests for the command-line interface."""

import pytest

from memegen_mcp.cli import build_parser, main


class TestCli:

    def test_parser_requires_a_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_categories(self, capsys):
        main(["categories"])

        assert "90 templates in total" in capsys.readouterr().out

    def test_search(self, capsys):
        main(["search", "surprised"])

        assert "surprised" in capsys.readouterr().out

    def test_tool_error_exits_non_zero(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "   "])
        assert exc_info.value.code == 1
