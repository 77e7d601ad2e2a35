# Copyright (c) 2025 Trae AI. All rights reserved.

import yaml
from pathlib import Path
from typing import List, Optional, Dict
from pydantic import BaseModel, field_validator

DEFAULT_CONFIG_PATH = "config.yaml"


class Config(BaseModel):
    video_extensions: List[str] = [".mkv", ".mp4", ".m4v", ".avi", ".mov", ".ts", ".webm"]
    subtitle_extensions: List[str] = [".srt", ".ass", ".ssa", ".sub", ".vtt"]
    blacklist: List[str] = ["#recycle", "@eaDir", ".DS_Store"]
    relative_links: bool = False
    path_mapping: Optional[Dict[str, str]] = None
    verbose: bool = False

    @field_validator("video_extensions", "subtitle_extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = "." + ext
            normalized.append(ext)
        return normalized

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """
        Loads the YAML config. A missing default config file yields the defaults,
        an explicitly requested one that is missing is an error.
        """
        if path is None:
            if not Path(DEFAULT_CONFIG_PATH).exists():
                return cls()
            path = DEFAULT_CONFIG_PATH

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))
