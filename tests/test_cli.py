"""
Tests for the nlscat command line.
"""

import pytest
from nlscat.cli import main


@pytest.fixture
def nls_env(monkeypatch, nls_dir, tmp_path):
    """Point NLSPATH at the fixture tree and hide any user config file."""
    monkeypatch.setenv("NLSPATH", f"{nls_dir}/%L/%N.cat;{nls_dir}/%l/%N.cat")
    monkeypatch.setenv("LANG", "en_US.UTF-8")
    monkeypatch.delenv("LC_ALL", raising=False)
    monkeypatch.delenv("LC_MESSAGES", raising=False)
    monkeypatch.setenv("NLSCAT_CONFIG", str(tmp_path / "none.yaml"))
    monkeypatch.setattr("nlscat.config.CONFIG_SEARCH_PATHS", [])


class TestGet:
    """nlscat get"""

    def test_found(self, nls_env, capsys):
        assert main(["get", "greet", "1", "2"]) == 0
        assert capsys.readouterr().out == "Welcome\n"

    def test_missing_message_prints_default(self, nls_env, capsys):
        assert main(["get", "greet", "9", "9", "--default", "nope"]) == 2
        assert capsys.readouterr().out == "nope\n"

    def test_missing_message_without_default(self, nls_env, capsys):
        assert main(["get", "greet", "9", "9"]) == 2
        assert "not found" in capsys.readouterr().err

    def test_missing_catalog(self, nls_env, capsys):
        assert main(["get", "nosuchprog", "1", "1"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_explicit_path(self, fixtures_dir, capsys):
        assert main(["get", str(fixtures_dir / "hello.cat"), "2", "5"]) == 0
        assert capsys.readouterr().out == "Hi\n"

    def test_locale_category(self, nls_env, monkeypatch, capsys):
        monkeypatch.setenv("LC_MESSAGES", "de.ISO8859-1")
        assert main(["get", "-l", "greet", "1", "1"]) == 0
        assert capsys.readouterr().out == "Hallo\n"


class TestPaths:
    """nlscat paths"""

    def test_lists_candidates(self, nls_env, nls_dir, capsys):
        assert main(["paths", "greet"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"* {nls_dir}/en_US.UTF-8/greet.cat",
            f"  {nls_dir}/en/greet.cat",
        ]


class TestDump:
    """nlscat dump"""

    def test_dump_sorted_and_escaped(self, fixtures_dir, capsys):
        assert main(["dump", str(fixtures_dir / "greet.msg")]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0].endswith("greet.msg: 8 messages")
        assert out[1] == "1 0 First of set one"
        assert "1 4 Line one\\nline two" in out
        assert "2 2 \\e[1mbold\\e[0m" in out

    def test_dump_missing(self, nls_env, capsys):
        assert main(["dump", "nosuchprog"]) == 1


class TestDecode:
    """nlscat decode"""

    def test_decode(self, capsys):
        assert main(["decode", "\\x48\\151\\d033"]) == 0
        assert capsys.readouterr().out == "Hi!\n"


def test_no_command(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
