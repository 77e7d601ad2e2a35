# Copyright (c) 2025 Trae AI. All rights reserved.

import logging
from pathlib import Path
from typing import Iterable, List
from sublink.core.config import Config
from sublink.core.grouper import VideoGrouper
from sublink.core.linker import Linker
from sublink.core.models import DirectoryReport, GroupMode
from sublink.core.parser import FilenameParser
from sublink.core.planner import LinkPlanner
from sublink.core.scanner import SubtitleScanner

logger = logging.getLogger(__name__)


class LinkService:
    """
    Runs the grouping, scanning, planning and linking steps for each input directory.
    A failure inside one directory never affects the others.
    """

    def __init__(self, config: Config, dry_run: bool = False):
        self.config = config
        parser = FilenameParser()
        self.grouper = VideoGrouper(config.video_extensions, parser=parser)
        self.scanner = SubtitleScanner(config.subtitle_extensions, parser=parser, blacklist=config.blacklist)
        self.planner = LinkPlanner(parser=parser)
        self.linker = Linker(config.path_mapping, relative=config.relative_links, dry_run=dry_run)

    def process(self, directories: Iterable[Path]) -> List[DirectoryReport]:
        reports = []
        for directory in directories:
            try:
                reports.append(self.process_directory(Path(directory)))
            except Exception as e:
                logger.exception(f"Failed to process {directory}: {e}")
                reports.append(DirectoryReport(directory=Path(directory), reason=f"unexpected error: {e}"))
        return reports

    def process_directory(self, directory: Path) -> DirectoryReport:
        if not directory.exists():
            logger.error(f"{directory} does not exist, ignoring")
            return DirectoryReport(directory=directory, reason="does not exist")
        if not directory.is_dir():
            logger.error(f"{directory} is not a folder, ignoring")
            return DirectoryReport(directory=directory, reason="not a folder")

        directory = directory.resolve()
        logger.info(f"Discovering video files in {directory}")
        group = self.grouper.group(directory)
        report = DirectoryReport(directory=directory, mode=group.mode, reason=group.reason)

        if group.mode == GroupMode.EMPTY:
            logger.warning(f"Skipping {directory}: {group.reason}")
            return report
        if group.mode == GroupMode.UNCLASSIFIABLE:
            logger.warning(f"Skipping {directory}: cannot tell versions from episodes ({group.reason})")
            return report

        logger.info(f"{group.mode.value} with {len(group.videos)} video(s) in {directory}")

        subtitles = self.scanner.scan(directory)
        report.subtitle_count = len(subtitles)
        if not subtitles:
            logger.warning(f"No subtitles with a recognized language in {directory}")
            return report

        assignments = self.planner.plan(group, subtitles)
        report.results = self.linker.link_all(assignments)

        # Aggregated Logging
        msg = f"{directory}: {report.created} created, {report.skipped} skipped, {report.failed} failed"
        if report.failed:
            logger.warning(msg)
        else:
            logger.info(msg)
        return report
