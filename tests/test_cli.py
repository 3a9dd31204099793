"""Tests for the command line entry point."""
import json
import pytest
from romakana.cli import main
from romakana.logger import logger, set_verbose


class TestCli:
    """Test romakana.cli.main."""

    def test_kana_only(self, capsys):
        assert main(["--kana-only", "watashi", "wa"]) == 0
        assert capsys.readouterr().out.strip() == "わたしは"

    def test_offline_translation(self, capsys):
        assert main(["--offline", "konnichiwa"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["kana"] == "こんにちは"
        assert result["english"] == "hello; good afternoon"
        assert result["source"] == "offline"

    def test_known_title(self, capsys):
        assert main(["--offline", "Sousou", "no", "Frieren"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["source"] == "known-title"
        assert result["title_type"] == "anime"

    def test_offline_without_gloss(self, capsys):
        assert main(["--offline", "xyz"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["source"] == "none"
        assert result["english"] == "Unable to translate: xyz"

    def test_invalid_cache_size(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--cache-size", "0", "neko"])
        assert exc_info.value.code == 2

    def test_verbose_switches_log_level(self, capsys):
        try:
            main(["--verbose", "--kana-only", "neko"])
            assert logger.level == 10
        finally:
            set_verbose(False)
        assert logger.level == 20
