"""UI module for strext."""

from strext.ui.renderer import (
    get_console,
    get_error_console,
    print_error,
    print_result,
    render_check,
    render_config,
)
from strext.ui.themes import THEME

__all__ = [
    "get_console",
    "get_error_console",
    "print_result",
    "print_error",
    "render_check",
    "render_config",
    "THEME",
]
