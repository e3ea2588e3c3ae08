"""Main entry point for strext."""

from typing import Callable, Optional

import typer
from pydantic import ValidationError

from strext import __version__
from strext.exceptions import InvalidArgumentError
from strext.models.config import Config
from strext.storage import get_config, get_storage, save_config
from strext.text import (
    is_numeric,
    is_valid_email,
    is_valid_url,
    remove_special_characters,
    to_title_case,
    truncate,
    truncate_with_ellipsis,
)
from strext.ui.renderer import (
    get_console,
    print_error,
    print_result,
    render_check,
    render_config,
)
from strext.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

# Exit code for rejected arguments
EXIT_BAD_ARGUMENT = 2

app = typer.Typer(
    name="strext",
    help="String validation and truncation helpers",
    add_completion=False,
    no_args_is_help=True,
)

check_app = typer.Typer(help="Check whether text is a valid email, URL or number")
config_app = typer.Typer(help="Show and change strext settings")

# Register subcommands
app.add_typer(check_app, name="check")
app.add_typer(config_app, name="config")

CHECKS: dict[str, Callable[[Optional[str]], bool]] = {
    "email": is_valid_email,
    "url": is_valid_url,
    "numeric": is_numeric,
}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        get_console().print(f"[bold cyan]strext[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """strext: string validation and truncation helpers."""
    config = get_config()
    setup_logging(level=config.log_level.value, log_file=config.log_file)


def _run_truncation(
    func: Callable[[Optional[str], int], Optional[str]],
    text: str,
    max_length: Optional[int],
) -> None:
    if max_length is None:
        max_length = get_config().default_max_length

    try:
        result = func(text, max_length)
    except InvalidArgumentError as e:
        logger.debug(f"{func.__name__} rejected max_length={max_length}")
        print_error(str(e))
        raise typer.Exit(code=EXIT_BAD_ARGUMENT)

    print_result(result or "")


@app.command("truncate")
def truncate_command(
    text: str = typer.Argument(..., help="Text to truncate"),
    max_length: Optional[int] = typer.Option(
        None,
        "--max-length",
        "-n",
        help="Maximum number of characters (defaults to the configured value)",
    ),
) -> None:
    """Cut text to at most --max-length characters."""
    _run_truncation(truncate, text, max_length)


@app.command("ellipsis")
def ellipsis_command(
    text: str = typer.Argument(..., help="Text to truncate"),
    max_length: Optional[int] = typer.Option(
        None,
        "--max-length",
        "-n",
        help="Maximum length including the trailing '...'",
    ),
) -> None:
    """Cut text to --max-length characters, ending in '...'."""
    _run_truncation(truncate_with_ellipsis, text, max_length)


@app.command("title")
def title_command(
    text: str = typer.Argument(..., help="Text to title-case"),
) -> None:
    """Convert text to Title Case."""
    print_result(to_title_case(text) or "")


@app.command("clean")
def clean_command(
    text: str = typer.Argument(..., help="Text to clean"),
) -> None:
    """Remove everything except letters, digits and whitespace."""
    print_result(remove_special_characters(text) or "")


def _run_check(kind: str, value: str) -> None:
    valid = CHECKS[kind](value)
    render_check(kind, value, valid)
    if not valid:
        raise typer.Exit(code=1)


@check_app.command("email")
def check_email(value: str = typer.Argument(..., help="Address to check")) -> None:
    """Check for a valid email address."""
    _run_check("email", value)


@check_app.command("url")
def check_url(value: str = typer.Argument(..., help="URL to check")) -> None:
    """Check for an absolute http(s) URL."""
    _run_check("url", value)


@check_app.command("numeric")
def check_numeric(value: str = typer.Argument(..., help="Text to check")) -> None:
    """Check for a numeric string."""
    _run_check("numeric", value)


@config_app.command("show")
def config_show() -> None:
    """Show the effective settings."""
    storage = get_storage()
    render_config(storage.load(), str(storage.config_path))


@config_app.command("set-max-length")
def config_set_max_length(
    max_length: int = typer.Argument(..., help="Default max length for truncation commands"),
) -> None:
    """Persist the default max length."""
    current = get_config()
    try:
        config = Config(**{**current.model_dump(), "default_max_length": max_length})
    except ValidationError as e:
        print_error(e.errors()[0]["msg"])
        raise typer.Exit(code=EXIT_BAD_ARGUMENT)

    save_config(config)
    logger.info(f"default_max_length set to {max_length}")
    get_console().print(f"[green]default_max_length set to {max_length}[/green]")


@config_app.command("reset")
def config_reset() -> None:
    """Restore the default settings."""
    get_storage().reset()
    get_console().print("[green]Settings reset to defaults[/green]")


if __name__ == "__main__":
    app()
