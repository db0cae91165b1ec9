"""Tests for levelwise/display.py and the package entry points"""

import importlib

import levelwise
from levelwise import constants
from levelwise.__main__ import main
from levelwise.display import display_levels, format_level


class TestFormatLevel:
    def test_integers(self):
        assert format_level(2, (5, 6, 7)) == "2: [5, 6, 7]"

    def test_empty_frontier(self):
        assert format_level(0, ()) == "0: []"

    def test_strings_are_quoted(self):
        assert format_level(1, ("a", "b")) == "1: ['a', 'b']"


class TestDisplayLevels:
    def test_prints_each_level(self, capsys):
        display_levels([(0, (1,)), (1, (2, 3))], title="Sample")
        assert capsys.readouterr().out == "Sample\n0: [1]\n1: [2, 3]\n"

    def test_without_title(self, capsys):
        display_levels([(0, ())])
        assert capsys.readouterr().out == "0: []\n"


class TestEntryPoints:
    def test_main_prints_sample_traversals(self, capsys):
        main()
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Graph",
            "0: [1]",
            "1: [2, 3, 4]",
            "2: [5, 6, 7, 8, 9, 10]",
            "Tree",
            "0: [1]",
            "1: [2, 3, 4]",
            "2: [5, 6, 7, 8, 9, 10]",
            "Cycle",
            "0: [1]",
            "1: [2]",
        ]

    def test_public_api(self):
        for name in levelwise.__all__:
            assert hasattr(levelwise, name), name

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LEVELWISE_LOG_LEVEL", "debug")
        importlib.reload(constants)
        assert constants.LOG_LEVEL == "DEBUG"

        monkeypatch.delenv("LEVELWISE_LOG_LEVEL")
        importlib.reload(constants)
        assert constants.LOG_LEVEL == constants.DEFAULT_LOG_LEVEL
