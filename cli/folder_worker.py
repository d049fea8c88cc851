'''폴더 분석 워커 CLI 진입점(KR). Folder analysis worker CLI entrypoint (EN).'''

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import click
from pydantic import ValidationError

from core import AnalyzerConfig, WorkerError, configure_logging, format_megabytes
from src.analyzer import (
    FatalInputError,
    ProgressEvent,
    ScanResult,
    format_progress_line,
    format_result_line,
    iter_scan_events,
)

LOGGER = logging.getLogger('cli.folder_worker')


def _load_config(config_file: Path | None) -> AnalyzerConfig:
    '''설정을 불러온다 · Load worker settings.'''

    if config_file is None:
        return AnalyzerConfig()
    try:
        return AnalyzerConfig.from_file(config_file)
    except (ValueError, ValidationError) as exc:
        raise WorkerError(str(exc), stage='config') from exc


@click.command()
@click.argument('root', required=False, type=click.Path(path_type=Path))
@click.option(
    '--max-depth',
    type=click.IntRange(min=0),
    default=None,
    help='최대 탐색 깊이 · Maximum folder depth (default 5)',
)
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='JSON 로그 파일 경로 · JSON log file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
def cli(
    root: Path | None,
    max_depth: int | None,
    config_file: Path | None,
    log_file: Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    '''폴더를 분석해 진행률과 결과를 출력한다 · Analyse a folder, streaming progress and one result.'''

    config = _load_config(config_file)
    if max_depth is not None:
        config.max_depth = max_depth
    level = config.log_level
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    configure_logging(log_file or config.log_file, level=level)
    if root is None:
        raise click.ClickException('No folder path provided')
    LOGGER.info('Started')

    request = config.to_request(root)
    events = iter_scan_events(
        request,
        progress_interval=config.progress_interval,
        progress_cap=config.progress_cap,
    )
    result: ScanResult | None = None
    try:
        for event in events:
            if isinstance(event, ProgressEvent):
                click.echo(format_progress_line(event))
            elif isinstance(event, ScanResult):
                result = event
    except FatalInputError as exc:
        raise click.ClickException(str(exc)) from exc
    if result is None:
        raise WorkerError('analysis finished without a result', stage='analyze')

    LOGGER.info(
        'Found %d files (%s MB)', result.total_files, format_megabytes(result.total_size_bytes)
    )
    LOGGER.info('Found %d media files', len(result.media_files))
    click.echo(format_result_line(result))


def main(argv: Sequence[str] | None = None) -> int:
    '''CLI 진입점을 실행한다 · Execute CLI entry point.'''

    argv = sys.argv[1:] if argv is None else argv
    try:
        cli.main(args=list(argv), prog_name='folder-worker', standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo('Aborted!', err=True)
        return 1
    except WorkerError as exc:
        click.echo(json.dumps(exc.to_payload(), ensure_ascii=False), err=True)
        return exc.exit_code
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
