# Copyright (c) 2025 Trae AI. All rights reserved.

import pytest
from pathlib import Path
from sublink.core.config import Config
from sublink.core.parser import FilenameParser


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def parser():
    return FilenameParser()


@pytest.fixture
def make_files(tmp_path):
    """
    Creates empty files below tmp_path / folder and returns that directory.
    """

    def _make(*names: str, folder: str = "movie") -> Path:
        root = tmp_path / folder
        root.mkdir(exist_ok=True)
        for name in names:
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        return root

    return _make
