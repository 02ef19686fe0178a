"""Tests for the resolve-alias tool"""
import logging
import sys

import pytest

from finder_tools import aliases
from finder_tools.errors import CapabilityUnavailable
from tests.fakes import OLD_ALIAS, PROJECTS_ALIAS


class TestResolveAlias:
    def test_returns_resolution(self, resolver):
        resolution = aliases.resolve_alias(PROJECTS_ALIAS, resolver)
        assert resolution.path == "/Volumes/Work/Projects"
        assert resolution.stale is False


class TestMain:
    def test_prints_target_path(self, resolver, capsys):
        assert aliases.main([PROJECTS_ALIAS], resolver=resolver) == 0
        out, err = capsys.readouterr()
        assert out == "/Volumes/Work/Projects\n"
        assert err == ""

    @pytest.mark.parametrize("args", [[], [PROJECTS_ALIAS, OLD_ALIAS]])
    def test_wrong_argument_count_prints_usage_to_stdout(self, resolver, capsys, args):
        assert aliases.main(args, resolver=resolver) == 1
        out, err = capsys.readouterr()
        assert out == "Usage: resolve-alias <alias-file>\n"
        assert err == ""

    def test_not_a_bookmark_reports_error(self, resolver, capsys):
        assert aliases.main(["/etc/hosts"], resolver=resolver) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert err.startswith("Error: ")
        assert "correct format" in err

    def test_stale_bookmark_still_resolves_with_warning(self, resolver, capsys, caplog):
        with caplog.at_level(logging.WARNING, logger="finder_tools.aliases"):
            assert aliases.main([OLD_ALIAS], resolver=resolver) == 0
        assert capsys.readouterr().out == "/Users/me/Documents/moved.txt\n"
        assert "bookmark data is stale" in caplog.text

    def test_fresh_bookmark_logs_nothing(self, resolver, capsys, caplog):
        with caplog.at_level(logging.WARNING, logger="finder_tools.aliases"):
            aliases.main([PROJECTS_ALIAS], resolver=resolver)
        assert caplog.records == []

    def test_repeated_runs_are_identical(self, resolver, capsys):
        aliases.main([PROJECTS_ALIAS], resolver=resolver)
        first = capsys.readouterr().out
        aliases.main([PROJECTS_ALIAS], resolver=resolver)
        assert capsys.readouterr().out == first

    def test_unavailable_foundation_reports_error(self, capsys):
        class NoFoundation:
            def resolve(self, path):
                raise CapabilityUnavailable("Foundation framework is not available")

        assert aliases.main([PROJECTS_ALIAS], resolver=NoFoundation()) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert err.startswith("Error: ")

    def test_default_resolver_without_foundation_reports_error(self, monkeypatch, capsys):
        monkeypatch.setitem(sys.modules, "Foundation", None)
        assert aliases.main([PROJECTS_ALIAS]) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert err.startswith("Error: Foundation framework is not available")
