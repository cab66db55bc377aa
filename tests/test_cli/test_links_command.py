"""
Tests for the links CLI command and top-level CLI behaviour.
"""

import io
import json
import logging

import pytest

from labelscan import __version__
from labelscan.cli.main import build_parser, main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger("labelscan")
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()


class TestLinksCommand:
    """Tests for `labelscan links`."""

    def test_json_single_service(self, capsys):
        main(["links", "BT1 1AA", "--service", "waze", "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert data == {
            "address": "BT1 1AA",
            "links": {"waze": "https://waze.com/ul?q=BT1%201AA"},
        }

    def test_repeated_service(self, capsys):
        main(["links", "BT1 1AA", "-s", "google", "-s", "apple", "-f", "json"])

        data = json.loads(capsys.readouterr().out)
        assert list(data["links"]) == ["google", "apple"]

    def test_text_table(self, capsys):
        main(["links", "BT1 1AA"])

        out = capsys.readouterr().out
        for service in ("google", "waze", "here", "apple"):
            assert service in out

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("SW1A 1AA\n"))

        main(["links", "-", "-s", "apple", "-f", "json"])

        data = json.loads(capsys.readouterr().out)
        assert data["links"]["apple"] == "https://maps.apple.com/?q=SW1A%201AA"

    def test_blank_address(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["links", "   "])

        assert exc_info.value.code == 1
        assert "No address" in capsys.readouterr().err

    def test_unknown_service_rejected_by_parser(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["links", "BT1 1AA", "-s", "bing"])
        assert exc_info.value.code == 2


class TestTopLevel:
    """Tests for global CLI behaviour."""

    def test_version(self, capsys):
        main(["--version"])
        assert f"labelscan {__version__}" in capsys.readouterr().out

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_global_flags(self):
        args = build_parser().parse_args(["-v", "--no-color", "extract", "x.txt"])

        assert args.verbose is True
        assert args.no_color is True
        assert args.command == "extract"

    def test_no_color_output(self, capsys):
        main(["--no-color", "links", "BT1 1AA", "-f", "json"])
        assert "\033[" not in capsys.readouterr().out
