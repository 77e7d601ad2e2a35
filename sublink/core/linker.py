# Copyright (c) 2025 Trae AI. All rights reserved.

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional
from .models import LinkAssignment, LinkResult, LinkStatus

logger = logging.getLogger(__name__)


class Linker:
    """
    Handles creation of symbolic links. Existing entries are never replaced.
    """

    def __init__(self, path_mapping: Optional[Dict[str, str]] = None, relative: bool = False, dry_run: bool = False):
        self.path_mapping = path_mapping or {}
        self.relative = relative
        self.dry_run = dry_run

    def link_target(self, source_path: Path, link_path: Path) -> str:
        """
        The string stored in the symlink: the source path, rewritten through the
        path mapping, or relative to the link's directory.
        """
        if self.relative:
            return os.path.relpath(source_path, link_path.parent)

        target_source = str(source_path)
        for old_prefix, new_prefix in self.path_mapping.items():
            if target_source.startswith(old_prefix):
                target_source = target_source.replace(old_prefix, new_prefix, 1)
                break
        return target_source

    def _existing(self, assignment: LinkAssignment, link_path: Path, target_source: str) -> Optional[LinkResult]:
        """
        Result for a link path that is already taken, None when it is free.
        """
        if link_path.is_symlink():
            current = os.readlink(link_path)
            if current == target_source:
                logger.info(f"Already linked: {link_path.name} -> {target_source}")
                return LinkResult(assignment=assignment, status=LinkStatus.UNCHANGED)
            logger.warning(f"Skipping {link_path.name}: already a symlink to {current}")
            return LinkResult(assignment=assignment, status=LinkStatus.EXISTS, message=f"points to {current}")

        if link_path.exists():
            logger.warning(f"Skipping {link_path.name}: a file with that name already exists")
            return LinkResult(assignment=assignment, status=LinkStatus.EXISTS, message="file exists")
        return None

    def link(self, assignment: LinkAssignment) -> LinkResult:
        link_path = assignment.target
        target_source = self.link_target(assignment.source, link_path)

        try:
            existing = self._existing(assignment, link_path, target_source)
            if existing is not None:
                return existing

            if self.dry_run:
                logger.info(f"Would link {link_path.name} -> {target_source}")
                return LinkResult(assignment=assignment, status=LinkStatus.PLANNED)

            os.symlink(target_source, link_path)
        except OSError as e:
            logger.error(f"Failed to link {link_path} -> {target_source}: {e}")
            return LinkResult(assignment=assignment, status=LinkStatus.FAILED, message=str(e))

        logger.info(f"Linked {link_path.name} -> {target_source}")
        return LinkResult(assignment=assignment, status=LinkStatus.CREATED)

    def link_all(self, assignments: List[LinkAssignment]) -> List[LinkResult]:
        return [self.link(assignment) for assignment in assignments]
