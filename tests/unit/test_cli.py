# Copyright (c) 2025 Trae AI. All rights reserved.

import logging
import pytest
from typer.testing import CliRunner
from sublink.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def movie_dir(tmp_path):
    root = tmp_path / "Heat"
    (root / "Subs").mkdir(parents=True)
    (root / "Heat (1995).mkv").touch()
    (root / "Subs" / "2_English.srt").touch()
    return root


def test_link_command_creates_links(movie_dir):
    result = runner.invoke(app, ["link", str(movie_dir)])

    assert result.exit_code == 0, result.output
    assert (movie_dir / "Heat (1995).en.srt").is_symlink()
    assert "Successfully created 1 links" in result.output


def test_link_command_dry_run(movie_dir):
    result = runner.invoke(app, ["link", "--dry-run", str(movie_dir)])

    assert result.exit_code == 0, result.output
    assert not (movie_dir / "Heat (1995).en.srt").is_symlink()
    assert "Dry run completed" in result.output


def test_bad_directories_do_not_fail_the_run(movie_dir, tmp_path):
    result = runner.invoke(app, ["link", str(tmp_path / "missing"), str(movie_dir)])

    assert result.exit_code == 0, result.output
    assert (movie_dir / "Heat (1995).en.srt").is_symlink()


def test_no_directories_is_a_usage_error():
    result = runner.invoke(app, ["link"])
    assert result.exit_code == 2


def test_broken_config_exits_with_error(movie_dir, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("video_extensions: 12\n")

    result = runner.invoke(app, ["link", "--config", str(config_file), str(movie_dir)])

    assert result.exit_code == 1
    assert not (movie_dir / "Heat (1995).en.srt").exists()


def test_languages_command():
    result = runner.invoke(app, ["languages"])
    assert result.exit_code == 0
    assert "english" in result.output


def test_entry_point_exposes_commands(movie_dir):
    import main

    result = runner.invoke(main.app, ["link", str(movie_dir)])

    assert result.exit_code == 0, result.output
    assert (movie_dir / "Heat (1995).en.srt").is_symlink()


def test_help_shows_directory_usage():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "sublink link DIR..." in result.output
