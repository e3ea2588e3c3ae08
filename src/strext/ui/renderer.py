"""Rich console rendering for strext."""

from rich.console import Console
from rich.table import Table

from strext.models.config import Config
from strext.ui.themes import THEME

# Singleton console instances
_console: Console | None = None
_error_console: Console | None = None


def get_console() -> Console:
    """Get the singleton stdout Console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def get_error_console() -> Console:
    """Get the singleton stderr Console instance."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True)
    return _error_console


def print_result(text: str) -> None:
    """Print user text verbatim.

    Markup and highlighting are off so brackets in the text survive.
    """
    get_console().print(text, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    get_error_console().print(
        f"Error: {message}", style=THEME["error"], markup=False, highlight=False, soft_wrap=True
    )


def render_check(kind: str, value: str, valid: bool) -> None:
    """Render the outcome of a validity check.

    Args:
        kind: What was checked (email, url, numeric).
        value: The checked text.
        valid: Check outcome.
    """
    console = get_console()
    if valid:
        console.print(f"[{THEME['success']}]valid[/{THEME['success']}]", end=" ")
    else:
        console.print(f"[{THEME['error']}]invalid[/{THEME['error']}]", end=" ")
    console.print(f"{kind}: {value!r}", markup=False, highlight=False, soft_wrap=True)


def render_config(config: Config, source: str) -> None:
    """Render the effective configuration as a table.

    Args:
        config: Configuration to show.
        source: Where the configuration was loaded from.
    """
    table = Table(title="strext settings", show_header=True, header_style="bold")
    table.add_column("Key", style=THEME["primary"])
    table.add_column("Value")

    for key, value in config.model_dump(mode="json").items():
        table.add_row(key, "-" if value is None else str(value))

    console = get_console()
    console.print(table)
    console.print(source, style=THEME["dim"], markup=False, highlight=False)
