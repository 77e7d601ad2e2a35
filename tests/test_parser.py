# Copyright (c) 2025 Trae AI. All rights reserved.

import pytest
from pathlib import Path
from sublink.core.parser import natural_key


def test_parse_version_marker(parser):
    video = parser.parse_video(Path("/m/The Thing (1982) - Director's Cut.mkv"))
    assert video.stem == "The Thing (1982) - Director's Cut"
    assert video.title == "the thing 1982"
    assert video.version == "Director's Cut"
    assert video.episode is None


def test_parse_bracketed_version(parser):
    video = parser.parse_video(Path("/m/Movie (2010) [Theatrical].mkv"))
    assert video.title == "movie 2010"
    assert video.version == "Theatrical"


def test_parse_edition_tag(parser):
    video = parser.parse_video(Path("/m/Movie (2010) {edition-Extended Edition}.mkv"))
    assert video.title == "movie 2010"
    assert video.version == "Extended Edition"


def test_parse_release_name(parser):
    video = parser.parse_video(Path("/m/Some.Movie.2019.2160p.UHD.BluRay.x265.mkv"))
    assert video.title == "some movie 2019"
    assert video.quality == "2160p.UHD.BluRay.x265"
    assert video.version is None


@pytest.mark.parametrize(
    "name, episode",
    [
        ("Show.S01E02.720p.mkv", "S01E02"),
        ("show s1e2.mkv", "S01E02"),
        ("Show S01E02E03.mkv", "S01E02-E03"),
        ("Show S01E02-E03.mkv", "S01E02-E03"),
        ("Show 1x02.mkv", "S01E02"),
    ],
)
def test_parse_episode_markers(parser, name, episode):
    video = parser.parse_video(Path("/tv") / name)
    assert video.episode == episode
    assert video.title == "show"


def test_resolution_is_not_an_episode(parser):
    assert parser.parse_video(Path("/m/Movie 1920x1080.mkv")).episode is None
    assert parser.parse_video(Path("/m/Movie.x264.mkv")).episode is None


@pytest.mark.parametrize(
    "stem, prefix, label",
    [
        ("2_English", "2", "English"),
        ("0000012_English", "0000012", "English"),
        ("3 Brazilian_Portuguese", "3", "Brazilian_Portuguese"),
        ("14-French", "14", "French"),
        ("5English", "5", "English"),
        ("English", None, "English"),
        ("12", None, "12"),
        ("2_", None, "2_"),
    ],
)
def test_split_subtitle_stem(parser, stem, prefix, label):
    assert parser.split_subtitle_stem(stem) == (prefix, label)


def test_natural_key_orders_numbers_numerically():
    names = ["10_English.srt", "2_English.srt", "1_french.srt", "B.srt", "a.srt"]
    assert sorted(names, key=natural_key) == [
        "1_french.srt",
        "2_English.srt",
        "10_English.srt",
        "a.srt",
        "B.srt",
    ]


@pytest.mark.parametrize(
    "name, year",
    [
        ("Heat (1995) - Extended.mkv", 1995),
        ("Heat.1995.1080p.BluRay.mkv", 1995),
        ("Blade Runner 2049 (2017).mkv", 2017),
        ("Movie 1080p.mkv", None),
    ],
)
def test_parse_year(parser, name, year):
    assert parser.parse_video(Path("/m") / name).year == year


@pytest.mark.parametrize(
    "stem, folder, expected",
    [
        ("Heat (1995)", "Heat (1995)", True),
        ("Heat (1995) - Extended", "Heat (1995)", True),
        ("heat (1995) [Remastered]", "Heat (1995)", True),
        ("Heat (1995) 1080p BluRay", "Heat (1995)", True),
        ("Heat (1995) - Extended", "Heat", True),
        ("Heat (1995) Extended", "Heat (1995)", False),
        ("Aliens (1986)", "Alien", False),
        ("Heat (1995)", "", False),
    ],
)
def test_starts_with_folder(parser, stem, folder, expected):
    assert parser.starts_with_folder(stem, folder) is expected


def test_full_title_keeps_text_after_dash(parser):
    assert parser.full_title("Mission Impossible - Fallout (2018) 1080p") == "mission impossible - fallout 2018"
    assert parser.full_title("Heat (1995) {edition-Extended}") == "heat 1995"
