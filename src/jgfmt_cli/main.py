import logging
from pathlib import Path

import typer
from jgfmt import __version__
from jgfmt.formatters import create_formatters

from .config import FormatConfig
from .dispatcher import Dispatcher
from .logs import configure_logging
from .models import FormatOptions

app = typer.Typer(
    help="Java and Groovy formatter - format [option] <directory or file with relative path>",
    add_completion=False,
)


def version_banner() -> list[str]:
    return ["jgfmt", "java and groovy source formatter", f"version {__version__}"]


def run_format(
    paths: list[Path],
    options: FormatOptions,
    config_file: Path | None,
    log: logging.Logger,
) -> bool:
    """Validate the positional arguments and hand the single target to the dispatcher"""
    if len(paths) != 1:
        log.info("Exactly one file can be formatted")
        return False

    config = FormatConfig(config_file, log)
    dispatcher = Dispatcher(create_formatters(config.formatter_configs(), log), log)
    return dispatcher.process_target(paths[0], options)


@app.command()
def format_files(
    files: list[Path] = typer.Argument(None, help="File or directory to format"),
    backup: bool = typer.Option(False, "-b", help="create a backup file"),
    version: bool = typer.Option(False, "--version", help="version of the formatter"),
    java: bool = typer.Option(False, "--java", help="only format java files"),
    groovy: bool = typer.Option(False, "--groovy", help="only format groovy files"),
    config_file: Path = typer.Option(None, "--config", help="TOML file with formatter settings"),
):
    """Format Java and Groovy files in place"""
    log = configure_logging()

    if version:
        for line in version_banner():
            log.info(line)
        return

    options = FormatOptions(backup=backup, java_only=java, groovy_only=groovy)
    run_format(list(files or []), options, config_file, log)


if __name__ == "__main__":
    app()
