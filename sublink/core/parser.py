# Copyright (c) 2025 Trae AI. All rights reserved.

import re
from pathlib import Path
from typing import List, Optional, Tuple, Union
from .models import VideoFile


def natural_key(name: str) -> Tuple:
    """
    Sort key comparing digit runs numerically and everything else
    case-insensitively, so "2_English" sorts before "10_English".
    """
    # re.split with a group alternates text and digit runs, text first
    parts: List[Union[int, str]] = [
        int(part) if index % 2 else part.casefold()
        for index, part in enumerate(re.split(r"(\d+)", name))
    ]
    return tuple(parts), name


class FilenameParser:
    """
    Parses video and subtitle filenames following the media server naming rules:
    `<title>[ - <version>][ SxxEyy][ <quality>].<ext>`.
    """

    def __init__(self):
        self.episode_patterns = [
            # S01E01, s1e2, S01E01E02, S01E01-E02, S01.E01
            re.compile(
                r"(?<![a-z0-9])s(\d{1,2})[ ._]?e(\d{1,3})(?:[ ._-]?e(\d{1,3}))?(?![0-9])",
                re.IGNORECASE,
            ),
            # 1x02
            re.compile(r"(?<![a-z0-9])(\d{1,2})x(\d{2,3})(?![0-9])", re.IGNORECASE),
        ]
        tags = [
            r"2160[pi]",
            r"1080[pi]",
            r"720[pi]",
            r"576[pi]",
            r"480[pi]",
            r"4k",
            r"uhd",
            r"hdr(?:10)?",
            r"bluray",
            r"blu-ray",
            r"bdrip",
            r"brrip",
            r"web-?dl",
            r"webrip",
            r"hdtv",
            r"dvdrip",
            r"remux",
            r"x264",
            r"x265",
            r"h\.?264",
            r"h\.?265",
            r"hevc",
            r"avc",
        ]
        self.quality_pattern = re.compile(
            r"(?<![a-z0-9])(?:" + "|".join(tags) + r")(?![a-z0-9])", re.IGNORECASE
        )
        self.edition_pattern = re.compile(r"\{edition-([^}]*)\}", re.IGNORECASE)
        self.trailing_bracket_pattern = re.compile(r"\s*\[([^\]]+)\]\s*$")
        self.subtitle_prefix_pattern = re.compile(r"^(\d+)[\s._-]*([^\d\s._-].*)$")
        self.year_patterns = [
            re.compile(r"\((19\d{2}|20\d{2})\)"),
            re.compile(r"(?<![0-9a-z])(19\d{2}|20\d{2})(?![0-9a-z])", re.IGNORECASE),
        ]
        # What may follow the folder name in a version file: "Movie (2010) - 1080p",
        # "Movie (2010) [Extended]", "Movie (2010) {edition-Final Cut}"
        self.version_separators = (" - ", " [", "[", " {", "{")
        self.folder_year_pattern = re.compile(r"^\s*\((?:19|20)\d{2}\)")

    def normalize_title(self, text: str) -> str:
        cleaned = re.sub(r"\[.*?\]|\{.*?\}", " ", text)
        cleaned = re.sub(r"[._()]", " ", cleaned)
        cleaned = re.sub(r"\s+", " ", cleaned)
        return cleaned.strip(" -").casefold()

    def extract_episode(self, text: str) -> Optional[Tuple[str, int, int]]:
        """
        Returns the normalized episode token with the span it occupies in `text`.
        """
        for pattern in self.episode_patterns:
            match = pattern.search(text)
            if not match:
                continue
            season, episode = int(match.group(1)), int(match.group(2))
            token = f"S{season:02d}E{episode:02d}"
            if pattern.groups > 2 and match.group(3):
                token += f"-E{int(match.group(3)):02d}"
            return token, match.start(), match.end()
        return None

    def extract_year(self, text: str) -> Optional[int]:
        # "(2010)" is preferred over a bare number, so "Blade Runner 2049 (2017)" is 2017
        for pattern in self.year_patterns:
            match = pattern.search(text)
            if match:
                return int(match.group(1))
        return None

    def starts_with_folder(self, stem: str, folder: str) -> bool:
        """
        True when `stem` is the folder name, optionally followed by a version
        label or a quality suffix.
        """
        name, prefix = stem.casefold(), folder.strip().casefold()
        if not prefix or not name.startswith(prefix):
            return False
        rest = self.folder_year_pattern.sub("", name[len(prefix):], count=1)
        if not rest or rest.startswith(self.version_separators):
            return True
        if rest[0] in " ._":
            head, quality = self._split_quality(rest)
            return quality is not None and not head.strip(" ._-")
        return False

    def full_title(self, stem: str) -> str:
        """
        Normalized stem without edition tags and quality suffix. Unlike the parsed
        title it keeps whatever follows " - ".
        """
        text, _ = self._split_quality(self.edition_pattern.sub("", stem))
        return self.normalize_title(text)

    def _split_quality(self, text: str) -> Tuple[str, Optional[str]]:
        match = self.quality_pattern.search(text)
        if not match:
            return text, None
        quality = text[match.start():].strip(" ._-")
        return text[: match.start()], quality or None

    def parse_video(self, path: Path) -> VideoFile:
        stem = path.stem
        working = stem
        version: Optional[str] = None
        episode: Optional[str] = None
        quality: Optional[str] = None

        edition = self.edition_pattern.search(working)
        if edition:
            version = edition.group(1).strip() or None
            working = (working[: edition.start()] + working[edition.end():]).strip()

        found = self.extract_episode(working)
        if found:
            episode, start, end = found
            title_text = working[:start]
            _, quality = self._split_quality(working[end:])
        else:
            title_text = working
            if " - " in title_text:
                title_text, marker = title_text.split(" - ", 1)
                marker = marker.strip()
                if marker and version is None:
                    version = marker
            else:
                bracket = self.trailing_bracket_pattern.search(title_text)
                if bracket and bracket.start() > 0:
                    if version is None:
                        version = bracket.group(1).strip()
                    title_text = title_text[: bracket.start()]
            title_text, quality = self._split_quality(title_text)

        return VideoFile(
            path=path,
            stem=stem,
            title=self.normalize_title(title_text),
            version=version,
            episode=episode,
            quality=quality,
            year=self.extract_year(working),
        )

    def split_subtitle_stem(self, stem: str) -> Tuple[Optional[str], str]:
        """
        Splits `<digits><separator><label>` into (digits, label). Without a digit
        prefix the whole stem is the label.
        """
        match = self.subtitle_prefix_pattern.match(stem)
        if not match:
            return None, stem
        return match.group(1), match.group(2)
