"""
Command-line interface for Loglet.
"""

import json
import time
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..core import Logger
from ..infrastructure.error_handler import LogletError, PanicError
from ..infrastructure.logger import logger
from ..models import FileFormat, FileLogTarget, Level, LogOptions, LoggerConfig
from ..services import read_records


FORMAT_CHOICE = click.Choice([fmt.value for fmt in FileFormat], case_sensitive=False)
LEVEL_CHOICE = click.Choice([level.value for level in Level], case_sensitive=False)


@click.group()
@click.version_option(version=__version__, prog_name="loglet")
def main():
    """Loglet - leveled console logging with JSON file persistence"""
    pass


@main.command("log")
@click.argument("level", type=LEVEL_CHOICE)
@click.argument("message")
@click.option("--process", "-p", default="", help="Process name shown after the level.")
@click.option("--user", "-u", default="", help="User associated with the message.")
@click.option("--since-ms", type=click.IntRange(min=0), default=None,
              help="Report a duration as if the process started this many ms ago.")
@click.option("--file", "file_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Save the record to this JSON file.")
@click.option("--default-file", is_flag=True, help="Save the record to ./log.json.")
@click.option("--format", "file_format", type=FORMAT_CHOICE, default=FileFormat.JSON_ARRAY.value,
              show_default=True, help="On-disk layout of the log file.")
@click.option("--no-spinner", is_flag=True, help="Print only the closing line.")
@click.option("--verbose", "-v", is_flag=True, help="Show internal diagnostics.")
def log_command(
    level: str,
    message: str,
    process: str,
    user: str,
    since_ms: Optional[int],
    file_path: Optional[Path],
    default_file: bool,
    file_format: str,
    no_spinner: bool,
    verbose: bool
):
    """Log MESSAGE at LEVEL. FATAL exits with 1, PANIC with 2."""

    if file_path is not None and default_file:
        raise click.UsageError("--file and --default-file are mutually exclusive")

    if file_path is not None:
        target = FileLogTarget.custom(file_path)
    elif default_file:
        target = FileLogTarget.default_path()
    else:
        target = FileLogTarget.disabled()

    config = LoggerConfig(
        file_log=target,
        file_format=FileFormat(file_format.lower()),
        show_spinner=not no_spinner,
        verbose=verbose
    )
    log = Logger(config)

    start_time = None
    if since_ms is not None:
        start_time = datetime.now() - timedelta(milliseconds=since_ms)
    options = LogOptions(start_time=start_time, process=process, user=user)

    level_value = Level.parse(level)
    if level_value is Level.FATAL:
        log.fatal(message, options)
    if level_value is Level.PANIC:
        try:
            log.panic(message, options)
        except PanicError as e:
            logger.debug(f"Panic raised: {e}")
            raise SystemExit(config.exit_code_panic)

    outcome = log.log(level_value, message, options)
    if not outcome.ok:
        logger.debug(f"Log call finished with error: {outcome.error}")


@main.command("show")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--format", "file_format", type=FORMAT_CHOICE, default=FileFormat.JSON_ARRAY.value,
              show_default=True, help="On-disk layout of the log file.")
def show_command(path: Path, file_format: str):
    """Print the records stored in PATH as a JSON array."""

    try:
        records = read_records(path, FileFormat(file_format.lower()))
    except LogletError as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False))


@main.command("demo")
@click.option("--dir", "directory", type=click.Path(file_okay=False, path_type=Path),
              default=Path("./logs"), show_default=True, help="Directory for demo log files.")
@click.option("--no-spinner", is_flag=True, help="Print only the closing lines.")
@click.option("--pause-ms", type=click.IntRange(min=0), default=200, show_default=True,
              help="Simulated work before the duration example.")
@click.option("--panic", "with_panic", is_flag=True,
              help="Finish with a panic that is recovered and logged.")
@click.option("--fatal", "with_fatal", is_flag=True,
              help="Finish with a fatal message; exits with status 1.")
def demo_command(directory: Path, no_spinner: bool, pause_ms: int, with_panic: bool, with_fatal: bool):
    """Walk through the logger features, writing files under --dir."""

    log = Logger(show_spinner=not no_spinner, default_path=directory / "default.json")

    log.info("Default settings - no file logging")

    log.set_default_file_log(directory / "custom_default.json")
    log.info("Default set to custom path")

    log.info(
        "Override default path for single log",
        file_log=directory / "single_override.json"
    )

    log.info(
        "Full features",
        LogOptions(
            start_time=datetime.now(),
            process="MainProcess",
            user="TestUser",
            file_log=directory / "full_test.json"
        )
    )

    # A directory that already exists as a file cannot hold the log
    blocker = directory / "not_a_directory"
    blocker.parent.mkdir(parents=True, exist_ok=True)
    blocker.touch()
    log.info("Error handling", file_log=blocker / "test.json")

    log.set_default_file_log(False)
    log.info("Default disabled with override", file_log=True)

    start_time = datetime.now()
    time.sleep(pause_ms / 1000)
    log.info(
        "Process duration",
        start_time=start_time,
        process="SlowProcess",
        file_log=directory / "process_test.json"
    )

    if with_panic:
        try:
            log.panic(
                "Panic with options",
                process="PanicProcess",
                user="TestUser",
                file_log=directory / "panic_test.json"
            )
        except PanicError:
            log.info(
                "Recovered from panic",
                process="PanicRecovery",
                file_log=directory / "recovery.json"
            )

    if with_fatal:
        log.fatal(
            "Fatal with options",
            process="FatalProcess",
            user="TestUser",
            file_log=directory / "fatal_test.json"
        )


if __name__ == "__main__":
    main()
