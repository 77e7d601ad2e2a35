# Copyright (c) 2025 Trae AI. All rights reserved.

from enum import Enum
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class GroupMode(Enum):
    SINGLE = "Single"
    MULTI_VERSION = "MultiVersion"
    SERIES = "Series"
    UNCLASSIFIABLE = "Unclassifiable"
    EMPTY = "Empty"


LINKABLE_MODES = {GroupMode.SINGLE, GroupMode.MULTI_VERSION, GroupMode.SERIES}


class VideoFile(BaseModel):
    """
    A video file found directly inside a processed directory, with the tokens
    parsed out of its filename.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    stem: str
    title: str
    version: Optional[str] = None
    episode: Optional[str] = None  # Normalized, e.g. S01E02
    quality: Optional[str] = None
    year: Optional[int] = None


class MovieGroup(BaseModel):
    """
    Outcome of grouping the videos of one directory. Failure outcomes are
    tagged through `mode` and carry a `reason`.
    """

    directory: Path
    videos: List[VideoFile] = Field(default_factory=list)
    mode: GroupMode
    reason: Optional[str] = None

    @model_validator(mode="after")
    def _check_invariants(self) -> "MovieGroup":
        if self.mode == GroupMode.SINGLE and len(self.videos) != 1:
            raise ValueError("a single group holds exactly one video")
        if self.mode == GroupMode.MULTI_VERSION and len({v.title for v in self.videos}) > 1:
            raise ValueError("all versions of a movie share one title")
        if self.mode == GroupMode.MULTI_VERSION and len({v.year for v in self.videos if v.year}) > 1:
            raise ValueError("all versions of a movie share one release year")
        if self.mode == GroupMode.SERIES:
            if len({v.title for v in self.videos}) > 1:
                raise ValueError("all episodes of a series share one show title")
            episodes = [v.episode for v in self.videos]
            if None in episodes or len(set(episodes)) != len(episodes):
                raise ValueError("every episode of a series needs a distinct episode marker")
        if self.mode == GroupMode.EMPTY and self.videos:
            raise ValueError("an empty group holds no videos")
        return self

    @property
    def is_linkable(self) -> bool:
        return self.mode in LINKABLE_MODES


class SubtitleCandidate(BaseModel):
    """
    A subtitle file found by the recursive scan.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    filename: str
    prefix: Optional[str] = None
    label: str
    language: Optional[str] = None  # ISO 639-1, None when unrecognized

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()


class LinkAssignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    video: VideoFile
    language: str
    source: Path
    link_name: str

    @property
    def target(self) -> Path:
        return self.video.path.parent / self.link_name


class LinkStatus(Enum):
    CREATED = "Created"
    UNCHANGED = "Unchanged"
    EXISTS = "Exists"
    FAILED = "Failed"
    PLANNED = "Planned"


class LinkResult(BaseModel):
    assignment: LinkAssignment
    status: LinkStatus
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in (LinkStatus.CREATED, LinkStatus.UNCHANGED, LinkStatus.PLANNED)


class DirectoryReport(BaseModel):
    """
    Everything that happened while processing one input directory.
    """

    directory: Path
    mode: Optional[GroupMode] = None  # None when the path itself was invalid
    reason: Optional[str] = None
    subtitle_count: int = 0
    results: List[LinkResult] = Field(default_factory=list)

    @property
    def skipped_directory(self) -> bool:
        return self.mode is None or self.mode not in LINKABLE_MODES

    @property
    def created(self) -> int:
        return sum(1 for r in self.results if r.status == LinkStatus.CREATED)

    @property
    def unchanged(self) -> int:
        return sum(1 for r in self.results if r.status == LinkStatus.UNCHANGED)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.status in (LinkStatus.EXISTS, LinkStatus.UNCHANGED))

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.status == LinkStatus.FAILED)
