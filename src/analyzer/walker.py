"""디렉터리 순회 도우미./Directory walking helpers."""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, FrozenSet, Iterator, Union

from .models import ScanRequest

ErrorReporter = Callable[[Path, OSError], None]


@dataclass(frozen=True, slots=True)
class DirectoryVisit:
    """진입하는 하위 폴더./A subfolder about to be walked."""

    path: str
    depth: int


@dataclass(frozen=True, slots=True)
class FileVisit:
    """발견된 일반 파일./A regular file found during the walk."""

    path: str
    size: int
    listing_size: int


WalkItem = Union[DirectoryVisit, FileVisit]


class DirectoryWalker:
    """깊이 제한 안에서 깊이 우선으로 순회합니다./Walk depth-first within a depth bound."""

    def __init__(self, request: ScanRequest, report_error: ErrorReporter) -> None:
        self._request = request
        self._report_error = report_error
        self._max_depth = request.max_depth

    def iter_entries(self) -> Iterator[WalkItem]:
        """폴더와 파일 방문을 순서대로 생성합니다./Yield folder and file visits in order."""

        root = self._request.root_path.absolute()
        yield from self._walk(root, 0, frozenset({os.path.realpath(root)}))

    def _walk(self, directory: Path, depth: int, ancestors: FrozenSet[str]) -> Iterator[WalkItem]:
        try:
            with os.scandir(directory) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError as exc:
            self._report_error(directory, exc)
            return
        listing_size = len(entries)
        for entry in entries:
            entry_path = Path(entry.path)
            try:
                stat_result = entry.stat(follow_symlinks=True)
            except OSError as exc:
                self._report_error(entry_path, exc)
                continue
            if stat.S_ISDIR(stat_result.st_mode):
                child_depth = depth + 1
                if child_depth > self._max_depth:
                    continue
                real_path = os.path.realpath(entry_path)
                if entry.is_symlink() and real_path in ancestors:
                    self._report_error(
                        entry_path,
                        OSError(errno.ELOOP, "symlink cycle back to an ancestor", str(entry_path)),
                    )
                    continue
                yield DirectoryVisit(path=str(entry_path), depth=child_depth)
                yield from self._walk(entry_path, child_depth, ancestors | {real_path})
            elif stat.S_ISREG(stat_result.st_mode):
                yield FileVisit(
                    path=str(entry_path),
                    size=int(stat_result.st_size),
                    listing_size=listing_size,
                )
