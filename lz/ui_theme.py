"""ANSI palettes for listing output.

Themes only affect escape sequences around names and size labels. The plain
theme has every field empty, so styled output equals the text fallback.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    directory: str
    executable: str
    size: str
    time: str
    mode: str
    owner: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    directory="\033[1;34m",
    executable="\033[1;32m",
    size="\033[38;5;109m",
    time="\033[38;5;250m",
    mode="\033[2;38;5;245m",
    owner="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    directory="\033[1;38;5;45m",
    executable="\033[1;38;5;84m",
    size="\033[38;5;73m",
    time="\033[38;5;153m",
    mode="\033[2;38;5;110m",
    owner="\033[38;5;117m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    directory="",
    executable="",
    size="",
    time="",
    mode="",
    owner="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def paint(text: str, color: str, theme: UITheme) -> str:
    """Wrap ``text`` in ``color`` and the theme reset, unless either is empty."""
    if not color or not text:
        return text
    return f"{color}{text}{theme.reset}"


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "paint",
    "resolve_theme",
]
