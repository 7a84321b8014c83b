'''warm-fs CLI 진입점(KR). warm-fs CLI entrypoint (EN).'''

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import click

from core import WarmConfig, WarmFsError, configure_logging
from warmfs import ResultStream, WarmSession

logger = logging.getLogger(__name__)


def _log_level(verbose: bool, quiet: bool, configured: str) -> str:
    '''로그 레벨을 결정한다 · Decide log level.'''

    if verbose:
        return 'DEBUG'
    if quiet:
        return 'WARNING'
    return configured


def _setup_logging(config: WarmConfig, level: str) -> None:
    '''로그 파일을 준비한다 · Prepare the JSON log file.'''

    try:
        configure_logging(config.log_file, level=level)
    except (OSError, ValueError) as exc:
        raise WarmFsError(
            f'cannot open log file: {exc}', stage='logging', path=config.log_file
        ) from exc


def _run_estimate(session: WarmSession, show_progress: bool) -> ResultStream:
    '''크기 추정 단계를 실행한다 · Run the size estimation pass.'''

    stream = session.iter_estimate()
    if not show_progress:
        stream.total()
        return stream
    with click.progressbar(
        length=0,
        label='Size estimation',
        show_pos=True,
        file=sys.stderr,
    ) as bar:
        for size in stream:
            if size:
                bar.length += size
                bar.update(0)
    return stream


def _run_warm(session: WarmSession, estimated: int, show_progress: bool) -> ResultStream:
    '''파일 읽기 단계를 실행한다 · Run the file reading pass.'''

    stream = session.iter_warm()
    if not show_progress:
        stream.total()
        return stream
    with click.progressbar(
        length=max(estimated, 1),
        label='Files reading',
        show_eta=True,
        show_percent=True,
        file=sys.stderr,
    ) as bar:
        for count in stream:
            bar.update(count)
    return stream


@click.command()
@click.argument('paths', nargs=-1, type=click.Path(path_type=Path))
@click.option('--threads', '-t', type=int, default=None, help='작업 스레드 수 · Number of threads')
@click.option(
    '--no-follow-links',
    '-n',
    is_flag=True,
    help='링크를 따르지 않음(순환 가능) · Do not follow links (they can be circular)',
)
@click.option('--chunk-size', type=int, default=None, help='읽기 청크 크기 · Read chunk size')
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
    help='로그 파일 경로 · Log file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option('--estimate-only', is_flag=True, help='추정만 수행 · Only estimate sizes')
@click.option('--no-progress', is_flag=True, help='진행률 표시 안 함 · Hide progress bars')
def warm_fs(
    paths: Sequence[Path],
    threads: int | None,
    no_follow_links: bool,
    chunk_size: int | None,
    config_file: Path | None,
    log_file: Path | None,
    verbose: bool,
    quiet: bool,
    estimate_only: bool,
    no_progress: bool,
) -> None:
    '''디렉터리의 파일을 미리 읽는다 · Warm up files under the given paths.'''

    config = WarmConfig.from_file(config_file) if config_file else WarmConfig()
    config = config.merged(
        paths=tuple(paths) if paths else None,
        num_threads=threads,
        follow_links=False if no_follow_links else None,
        chunk_size=chunk_size,
        log_file=log_file,
    )
    _setup_logging(config, _log_level(verbose, quiet, config.log_level))
    session = config.build_session()
    show_progress = not no_progress

    estimation = _run_estimate(session, show_progress)
    estimated = estimation.statistics()
    summary: dict[str, object] = {
        'stage': 'estimate' if estimate_only else 'warm',
        'estimated_bytes': estimated.bytes,
        'files': estimated.files,
        'skipped': estimated.skipped,
        'duration_seconds': estimated.duration_seconds,
    }
    if not estimate_only:
        warmed = _run_warm(session, estimated.bytes, show_progress).statistics()
        summary.update(
            {
                'warmed_bytes': warmed.bytes,
                'files': warmed.files,
                'skipped': warmed.skipped,
                'duration_seconds': round(estimated.duration_seconds + warmed.duration_seconds, 2),
            }
        )
    logger.info('warm-fs finished: %s', summary)
    click.echo(json.dumps(summary, ensure_ascii=False))


def main(argv: Sequence[str] | None = None) -> int:
    '''CLI 진입점을 실행한다 · Execute CLI entry point.'''

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        warm_fs.main(args=args, prog_name='warm-fs', standalone_mode=False)
    except WarmFsError as exc:
        click.echo(json.dumps(exc.to_payload(), ensure_ascii=False), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo('Aborted!', err=True)
        return 1
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
