'''KR: 테스트 폴더 트리 픽스처. EN: Pytest folder tree fixtures.'''

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from core.logging import WORKER_LOGGERS
from tests.fixtures.virtual_fs import create_virtual_tree


@pytest.fixture
def scenario_tree(tmp_path: Path) -> Path:
    '''텍스트 1개, 이미지 1개, 하위 폴더 영상 1개 · One text, one image, one nested video.'''

    root = tmp_path / 'scenario'
    create_virtual_tree(
        root,
        {
            'a.txt': b'a' * 10,
            'b.jpg': b'b' * 20,
            'sub/c.mp4': b'c' * 30,
        },
    )
    return root


@pytest.fixture
def mixed_tree(tmp_path: Path) -> Path:
    '''대소문자 확장자와 여러 깊이를 섞은 트리 · Mixed-case extensions across several levels.'''

    root = tmp_path / 'mixed'
    create_virtual_tree(
        root,
        {
            'HOLIDAY.JPEG': b'1' * 7,
            'clip.MkV': b'2' * 11,
            'notes.md': '# notes\n',
            'archive.tar.gz': b'3' * 5,
            'photos/2024/beach.Png': b'4' * 13,
            'photos/2024/raw.cr2': b'5' * 17,
            'videos/trailer.webm': b'6' * 19,
            'videos/old/home.wmv': b'7' * 23,
            'videos/old/flash.flv': b'8' * 2,
            'docs/readme.txt': 'hello\n',
            '.hidden/cover.gif': b'9' * 3,
        },
    )
    (root / 'empty').mkdir()
    return root


@pytest.fixture(autouse=True)
def reset_worker_logging() -> Iterator[None]:
    '''테스트마다 워커 로거를 초기화 · Detach worker log handlers after each test.'''

    yield
    for name in WORKER_LOGGERS:
        logger = logging.getLogger(name)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
