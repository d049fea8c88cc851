"""폴더 분석 벤치마크 및 메모리 측정./Benchmark folder analysis with memory profile."""

from __future__ import annotations

import argparse
import tracemalloc
from pathlib import Path
from time import perf_counter

from core.decimal_format import format_2d, format_megabytes
from src.analyzer import ProgressEvent, ScanResult, analyze, format_progress_line


def _print_progress(event: ProgressEvent) -> None:
    """진행 상황을 출력합니다./Print progress updates."""

    print(format_progress_line(event), flush=True)


def run_benchmark(root: Path, max_depth: int) -> ScanResult:
    """벤치마크 분석을 실행합니다./Execute benchmark analysis."""

    tracemalloc.start()
    started = perf_counter()
    result = analyze(root, max_depth=max_depth, progress_callback=_print_progress)
    elapsed = perf_counter() - started
    _current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(
        "SUMMARY",
        f"duration={format_2d(elapsed)}s",
        f"files={result.total_files}",
        f"media={len(result.media_files)}",
        f"size_mb={format_megabytes(result.total_size_bytes)}",
        f"peak_mb={format_megabytes(peak)}",
        sep=" ",
    )
    return result


def main() -> None:
    """CLI 진입점./CLI entry point."""

    parser = argparse.ArgumentParser(description="Folder analysis benchmark")
    parser.add_argument("root", type=Path, help="directory to analyse")
    parser.add_argument("--max-depth", type=int, default=5, help="maximum folder depth")
    args = parser.parse_args()
    run_benchmark(args.root.resolve(), args.max_depth)


if __name__ == "__main__":
    main()
