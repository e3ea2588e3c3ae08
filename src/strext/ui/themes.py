"""Color themes and styling for strext."""

from typing import TypedDict


class ThemeColors(TypedDict):
    """Theme color definitions."""

    primary: str
    success: str
    error: str
    dim: str


THEME: ThemeColors = {
    "primary": "cyan",
    "success": "green",
    "error": "red",
    "dim": "dim",
}
