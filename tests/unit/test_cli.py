"""
Tests for the nodeprobe command-line interface.
"""

import json
from functools import partial

import pytest
from click.testing import CliRunner

from nodeprobe import __version__
from nodeprobe.cli import cli
from nodeprobe.http import HttpFetcher


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(
        "<html><body><h1>Welcome</h1><ul><li>A</li><li>B</li></ul>"
        '<a href="/admin" class="nav">Admin</a><p>para</p></body></html>',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def mocked_fetcher(monkeypatch, transport):
    monkeypatch.setattr("nodeprobe.cli.HttpFetcher", partial(HttpFetcher, transport=transport))


class TestSelectCommand:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_single_text(self, runner, page):
        result = runner.invoke(cli, ["select", str(page), "h1"], obj={})

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Welcome"

    def test_many_as_json(self, runner, page):
        result = runner.invoke(cli, ["select", str(page), "li", "--json"], obj={})

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == ["A", "B"]

    def test_many_as_table(self, runner, page):
        result = runner.invoke(cli, ["select", str(page), "li"], obj={})

        assert result.exit_code == 0, result.output
        assert "A" in result.output
        assert "B" in result.output

    def test_count(self, runner, page):
        result = runner.invoke(cli, ["select", str(page), "li", "--count"], obj={})

        assert result.output.strip() == "2"

    def test_attribute(self, runner, page):
        result = runner.invoke(cli, ["select", str(page), "a", "--attr", "href", "--json"], obj={})

        assert json.loads(result.output) == "/admin"

    def test_inner_html_with_bs4(self, runner, page):
        result = runner.invoke(cli, ["--backend", "bs4", "select", str(page), "ul", "--html", "--json"], obj={})

        assert json.loads(result.output) == "<li>A</li><li>B</li>"

    def test_missing_source(self, runner, tmp_path):
        result = runner.invoke(cli, ["select", str(tmp_path / "nope.html"), "h1"], obj={})

        assert result.exit_code != 0
        assert "not a URL or readable file" in result.output

    def test_url_source(self, runner, mocked_fetcher):
        result = runner.invoke(cli, ["select", "http://testserver/", "h1"], obj={})

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Welcome"


class TestFollowCommand:
    def test_follow_link(self, runner, mocked_fetcher):
        result = runner.invoke(cli, ["follow", "http://testserver/", "a#admin"], obj={})

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "200 http://testserver/admin"

    def test_follow_non_link_fails_cleanly(self, runner, page):
        result = runner.invoke(cli, ["follow", str(page), "p"], obj={})

        assert result.exit_code == 1
        assert "Not able to interact with `p` elements." in result.output
