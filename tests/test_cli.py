import pytest
from click.testing import CliRunner

from hygge_feed.cli import cli
from hygge_feed.config import reset_settings
from hygge_feed.models import UserFeed


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def feed_file(tmp_path, mixed_feed):
    path = tmp_path / "feed.json"
    path.write_text(mixed_feed.model_dump_json())
    return path


def _write_feed(tmp_path, feed: UserFeed):
    path = tmp_path / "feed.json"
    path.write_text(feed.model_dump_json())
    return path


def test_weights_command() -> None:
    result = CliRunner().invoke(cli, ["weights"])

    assert result.exit_code == 0
    lines = [line.split() for line in result.output.splitlines()[2:] if line.strip()]
    assert lines[0] == ["view", "1"]
    assert lines[-1] == ["purchase", "7"]


def test_articles_command_lists_in_feed_order(feed_file) -> None:
    result = CliRunner().invoke(cli, ["articles", str(feed_file)])

    assert result.exit_code == 0
    assert result.output.index("Article x") < result.output.index("Article z")
    assert "Movie y" not in result.output
    assert "2 of 2 article(s)" in result.output


def test_articles_command_limit(feed_file) -> None:
    result = CliRunner().invoke(cli, ["articles", str(feed_file), "--limit", "1"])

    assert result.exit_code == 0
    assert "Article z" not in result.output
    assert "1 of 2 article(s)" in result.output


def test_articles_command_empty_feed(tmp_path) -> None:
    path = _write_feed(tmp_path, UserFeed(sections=[]))

    result = CliRunner().invoke(cli, ["articles", str(path)])

    assert result.exit_code == 0
    assert "No articles in feed" in result.output


def test_invalid_feed_file(tmp_path) -> None:
    path = tmp_path / "feed.json"
    path.write_text('{"next_cursor": null, "has_more": false}')

    result = CliRunner().invoke(cli, ["articles", str(path)])

    assert result.exit_code == 1
    assert "Invalid feed" in result.output


def test_inspect_command(feed_file) -> None:
    result = CliRunner().invoke(cli, ["inspect", str(feed_file)])

    assert result.exit_code == 0
    assert "Top stories" in result.output
    assert "article: 1, movie: 1" in result.output
    assert "article: 1, event: 1, video: 1" in result.output
    assert "has_more: True, next_cursor: cursor-2" in result.output


def test_inspect_pagination_mismatch(tmp_path) -> None:
    path = _write_feed(tmp_path, UserFeed(sections=[], next_cursor=None, has_more=True))
    runner = CliRunner()

    lenient = runner.invoke(cli, ["inspect", str(path)])
    strict = runner.invoke(cli, ["inspect", str(path), "--strict"])

    assert lenient.exit_code == 0
    assert "Warning: has_more disagrees with next_cursor" in lenient.output
    assert strict.exit_code == 1
    assert "Pagination mismatch" in strict.output


def test_feed_file_that_is_not_utf8(tmp_path) -> None:
    path = tmp_path / "feed.json"
    path.write_bytes(b'{"sections": [], "next_cursor": "\xff"}')

    result = CliRunner().invoke(cli, ["articles", str(path)])

    assert result.exit_code == 1
    assert "Invalid feed" in result.output


def test_articles_command_rejects_negative_limit(feed_file) -> None:
    result = CliRunner().invoke(cli, ["articles", str(feed_file), "--limit", "-1"])

    assert result.exit_code == 2
    assert "Article x" not in result.output
