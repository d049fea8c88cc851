'''폴더 분석 워커 실행 래퍼(KR). Folder analysis worker launcher (EN).

호스트 프로세스는 `python folder_worker.py <folder>` 형태로 실행합니다.
'''

from __future__ import annotations

import sys
from pathlib import Path

# Ensure local packages are discoverable when launched from another directory
CURRENT_DIR = Path(__file__).resolve().parent
if str(CURRENT_DIR) not in sys.path:
    sys.path.insert(0, str(CURRENT_DIR))

from cli.folder_worker import main  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ['main']


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
