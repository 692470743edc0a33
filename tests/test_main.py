"""Tests for the command-line entry point."""

import json

import pytest
import structlog.testing

from feedloom import main as cli
from feedloom.exceptions import FeedUnreachableError
from feedloom.models.feed import ParsedArticle, ParsedFeed


@pytest.fixture
def fake_run(monkeypatch):
    calls = []

    async def _run(url, feed_type, timeout):
        calls.append((url, feed_type, timeout))
        return ParsedFeed(
            title="CLI Feed",
            articles=[
                ParsedArticle(
                    title="Entry",
                    link="https://example.com/entry",
                    pub_date="2024-01-01T00:00:00.000Z",
                    source="CLI Feed",
                )
            ],
        )

    monkeypatch.setattr(cli, "run_cli", _run)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    return calls


def test_prints_feed_as_camel_case_json(fake_run, capsys):
    exit_code = cli.main(["https://example.com/feed.xml", "--timeout", "5"])

    assert exit_code == 0
    assert fake_run == [("https://example.com/feed.xml", None, 5.0)]
    output = json.loads(capsys.readouterr().out)
    assert output["title"] == "CLI Feed"
    assert output["imageUrl"] is None
    article = output["articles"][0]
    assert article["pubDate"] == "2024-01-01T00:00:00.000Z"
    assert article["isReadLater"] is False


def test_google_news_query_builds_url(fake_run):
    with structlog.testing.capture_logs() as logs:
        cli.main(["--google-news", "open source"])

    url, _feed_type, _timeout = fake_run[0]
    assert url.startswith("https://news.google.com/rss/search?q=open%20source")
    built = [entry for entry in logs if entry["event"] == "Built Google News search feed"]
    assert built[0]["title"] == "Google News - open source"


def test_errors_are_reported_on_stderr(monkeypatch, capsys):
    async def _fail(url, feed_type, timeout):
        raise FeedUnreachableError()

    monkeypatch.setattr(cli, "run_cli", _fail)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)

    exit_code = cli.main(["https://example.com/feed.xml"])

    assert exit_code == 1
    assert "Unable to fetch the feed" in capsys.readouterr().err


def test_url_is_required(capsys):
    with pytest.raises(SystemExit):
        cli.main([])
