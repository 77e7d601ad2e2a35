# Copyright (c) 2025 Trae AI. All rights reserved.

import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional
from .models import GroupMode, MovieGroup, VideoFile
from .parser import FilenameParser, natural_key

logger = logging.getLogger(__name__)


class VideoGrouper:
    """
    Decides whether the videos directly inside a directory are one movie, several
    versions of one movie, or episodes of a series.

    Directories that fit none of these are reported as Unclassifiable rather than
    being guessed at.
    """

    def __init__(self, video_extensions: List[str], parser: Optional[FilenameParser] = None):
        self.video_extensions = {ext.lower() for ext in video_extensions}
        self.parser = parser or FilenameParser()

    def is_video(self, path: Path) -> bool:
        return path.suffix.lower() in self.video_extensions

    def list_videos(self, root_path: Path) -> List[Path]:
        """
        Non-recursive listing of the video files in `root_path`, in natural name order.
        """
        videos = [
            entry
            for entry in root_path.iterdir()
            if not entry.name.startswith(".") and entry.is_file() and self.is_video(entry)
        ]
        return sorted(videos, key=lambda p: natural_key(p.name))

    def group(self, root_path: Path) -> MovieGroup:
        paths = self.list_videos(root_path)
        if not paths:
            return MovieGroup(directory=root_path, mode=GroupMode.EMPTY, reason="no video files found")

        videos = [self.parser.parse_video(p.absolute()) for p in paths]
        if len(videos) == 1:
            return MovieGroup(directory=root_path, videos=videos, mode=GroupMode.SINGLE)

        if any(v.episode for v in videos):
            return self._group_series(root_path, videos)
        return self._group_versions(root_path, videos)

    def _unclassifiable(self, root_path: Path, videos: List[VideoFile], reason: str) -> MovieGroup:
        return MovieGroup(directory=root_path, videos=videos, mode=GroupMode.UNCLASSIFIABLE, reason=reason)

    def _group_series(self, root_path: Path, videos: List[VideoFile]) -> MovieGroup:
        missing = [v.path.name for v in videos if v.episode is None]
        if missing:
            return self._unclassifiable(root_path, videos, f"episode marker missing from {', '.join(missing)}")

        titles = sorted({v.title for v in videos})
        if len(titles) > 1:
            return self._unclassifiable(
                root_path, videos, f"episodes of different shows: {', '.join(repr(t) for t in titles)}"
            )

        counts = Counter(v.episode for v in videos)
        duplicates = sorted(episode for episode, count in counts.items() if count > 1)
        if duplicates:
            return self._unclassifiable(root_path, videos, f"several files for episode {', '.join(duplicates)}")

        return MovieGroup(directory=root_path, videos=videos, mode=GroupMode.SERIES)

    def _group_versions(self, root_path: Path, videos: List[VideoFile]) -> MovieGroup:
        years = sorted({v.year for v in videos if v.year})
        if len(years) > 1:
            return self._unclassifiable(root_path, videos, f"different years: {', '.join(map(str, years))}")

        # Version files named after their folder belong to one movie, whatever
        # label follows the folder name
        if all(self.parser.starts_with_folder(v.stem, root_path.name) for v in videos):
            anchor = self.parser.normalize_title(root_path.name)
            videos = [v if v.title == anchor else v.model_copy(update={"title": anchor}) for v in videos]
            return MovieGroup(directory=root_path, videos=videos, mode=GroupMode.MULTI_VERSION)

        # Outside such a folder " - " may be part of the title ("Mission Impossible -
        # Fallout"), so the whole name up to the quality suffix has to match
        titles = sorted({self.parser.full_title(v.stem) for v in videos})
        if len(titles) > 1:
            return self._unclassifiable(
                root_path, videos, f"different titles: {', '.join(repr(t) for t in titles)}"
            )
        videos = [v if v.title == titles[0] else v.model_copy(update={"title": titles[0]}) for v in videos]
        return MovieGroup(directory=root_path, videos=videos, mode=GroupMode.MULTI_VERSION)
