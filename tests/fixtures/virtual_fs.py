"""테스트용 폴더 트리 도우미./Folder tree helpers for tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable


def create_virtual_tree(base: Path, files: dict[str, str | bytes]) -> list[Path]:
    """상대 경로 맵으로 파일을 생성합니다./Create files from relative path mapping."""

    created: list[Path] = []
    for relative, content in files.items():
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        created.append(path)
    return created


def bulk_create_files(
    base: Path, count: int, prefix: str = "file", extension: str = ".txt"
) -> Iterable[Path]:
    """대량 파일을 생성합니다./Generate many files for stress tests."""

    for index in range(count):
        path = base / f"{prefix}_{index:05d}{extension}"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"sample-{index}", encoding="utf-8")
        yield path


def create_nested_tree(base: Path, levels: int, extension: str = ".png") -> list[Path]:
    """단계마다 파일 하나를 가진 중첩 트리를 만듭니다./Build a chain of folders, one file per level."""

    created: list[Path] = []
    current = base
    for level in range(levels + 1):
        current.mkdir(parents=True, exist_ok=True)
        path = current / f"level_{level}{extension}"
        path.write_bytes(b"x" * (level + 1))
        created.append(path)
        current = current / f"d{level + 1}"
    return created


def reference_walk(root: Path, max_depth: int) -> list[Path]:
    """os.walk 기반 기준 순회./Independent reference walk with os.walk.

    루트는 깊이 0이며 깊이가 max_depth 이하인 폴더의 파일만 셉니다.
    """

    found: list[Path] = []
    root_depth = len(root.parts)
    for dirpath, dirnames, filenames in os.walk(root):
        depth = len(Path(dirpath).parts) - root_depth
        if depth >= max_depth:
            dirnames[:] = []
        for name in filenames:
            path = Path(dirpath) / name
            if path.is_file():
                found.append(path)
    return found
