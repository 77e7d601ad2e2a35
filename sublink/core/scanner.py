# Copyright (c) 2025 Trae AI. All rights reserved.

import logging
import os
from pathlib import Path
from typing import List, Optional
from .languages import LanguageResolver
from .models import SubtitleCandidate
from .parser import FilenameParser, natural_key

logger = logging.getLogger(__name__)


class SubtitleScanner:
    """
    Recursively finds subtitle files below a directory and resolves their languages.

    Candidates come out in a fixed order: files of a directory (natural name order)
    before the files of its subdirectories, which are visited in natural name order.
    """

    def __init__(
        self,
        subtitle_extensions: List[str],
        resolver: Optional[LanguageResolver] = None,
        parser: Optional[FilenameParser] = None,
        blacklist: List[str] = None,
    ):
        self.subtitle_extensions = {ext.lower() for ext in subtitle_extensions}
        self.resolver = resolver or LanguageResolver()
        self.parser = parser or FilenameParser()
        self.blacklist = set(blacklist) if blacklist else {"#recycle", "@eaDir", ".DS_Store"}

    def is_subtitle(self, path: Path) -> bool:
        return path.suffix.lower() in self.subtitle_extensions

    def scan(self, root_path: Path) -> List[SubtitleCandidate]:
        candidates = []
        if not root_path.is_dir():
            return candidates

        for root, dirs, files in os.walk(root_path):
            # Sorting dirs in place fixes the order os.walk descends in
            dirs[:] = sorted(
                (d for d in dirs if d not in self.blacklist and not d.startswith(".")),
                key=natural_key,
            )

            for file in sorted(files, key=natural_key):
                if file in self.blacklist or file.startswith("."):
                    continue
                path = Path(root) / file
                if not self.is_subtitle(path):
                    continue
                if path.is_symlink():
                    logger.debug(f"Ignoring symlink {path}")
                    continue

                candidate = self.inspect(path)
                if candidate.language is None:
                    logger.warning(f"Unrecognized language '{candidate.label}' in {path}, skipping")
                    continue
                logger.debug(f"Found {candidate.language} subtitle {path}")
                candidates.append(candidate)
        return candidates

    def inspect(self, path: Path) -> SubtitleCandidate:
        """
        Parses a single subtitle filename. The returned candidate has no language
        when its label is not recognized.
        """
        prefix, label = self.parser.split_subtitle_stem(path.stem)
        return SubtitleCandidate(
            path=path.absolute(),
            filename=path.name,
            prefix=prefix,
            label=label,
            language=self.resolver.resolve(label),
        )
