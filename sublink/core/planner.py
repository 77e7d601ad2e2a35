# Copyright (c) 2025 Trae AI. All rights reserved.

import logging
from typing import Dict, List, Optional, Set
from .models import GroupMode, LinkAssignment, MovieGroup, SubtitleCandidate, VideoFile
from .parser import FilenameParser

logger = logging.getLogger(__name__)


class LinkPlanner:
    """
    Picks one subtitle per language for every video of a group and names the link
    `<video-base>.<language>.<ext>`, the pattern media servers look for.
    """

    def __init__(self, parser: Optional[FilenameParser] = None):
        self.parser = parser or FilenameParser()

    def link_name(self, video: VideoFile, language: str, extension: str) -> str:
        return f"{video.stem}.{language}{extension.lower()}"

    def _matches(self, group: MovieGroup, video: VideoFile, folder: str) -> bool:
        name = folder.casefold()
        if name == video.stem.casefold():
            return True
        if group.mode == GroupMode.MULTI_VERSION and video.version and name == video.version.casefold():
            return True
        if group.mode == GroupMode.SERIES and video.episode:
            found = self.parser.extract_episode(folder)
            return found is not None and found[0] == video.episode
        return False

    def _owners(self, group: MovieGroup, candidate: SubtitleCandidate) -> Set[int]:
        """
        Indexes of the videos a subtitle is dedicated to, judged by the folders it sits in.
        """
        try:
            folders = candidate.path.parent.relative_to(group.directory.absolute()).parts
        except ValueError:
            return set()
        return {
            index
            for index, video in enumerate(group.videos)
            for folder in folders
            if self._matches(group, video, folder)
        }

    def candidates_for(
        self, group: MovieGroup, index: int, subtitles: List[SubtitleCandidate]
    ) -> List[SubtitleCandidate]:
        """
        Subtitles usable by the video at `index`: the ones in its own folders first,
        then the shared ones, both in scan order. Subtitles dedicated to another
        video are left out.
        """
        own, shared = [], []
        for candidate in subtitles:
            owners = self._owners(group, candidate)
            if not owners:
                shared.append(candidate)
            elif index in owners:
                own.append(candidate)
        return own + shared

    def plan(self, group: MovieGroup, subtitles: List[SubtitleCandidate]) -> List[LinkAssignment]:
        if not group.is_linkable:
            return []

        assignments = []
        for index, video in enumerate(group.videos):
            chosen: Dict[str, SubtitleCandidate] = {}
            for candidate in self.candidates_for(group, index, subtitles):
                if candidate.language is None:
                    continue
                if candidate.language in chosen:
                    logger.debug(
                        f"Ignoring {candidate.path} for {video.path.name}: "
                        f"{candidate.language} already taken by {chosen[candidate.language].filename}"
                    )
                    continue
                chosen[candidate.language] = candidate
                assignments.append(
                    LinkAssignment(
                        video=video,
                        language=candidate.language,
                        source=candidate.path,
                        link_name=self.link_name(video, candidate.language, candidate.extension),
                    )
                )
        return assignments
