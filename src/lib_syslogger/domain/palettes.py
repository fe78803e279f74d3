"""Console colour palettes keyed by theme name.

Each palette maps the eight severity names to Rich style strings. Consumed by
:class:`~lib_syslogger.adapters.console.rich_console.RichConsoleAdapter` and the
``logdemo`` CLI command.
"""

from __future__ import annotations

CONSOLE_STYLE_THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "EMERG": "bold white on red",
        "ALERT": "bold red",
        "CRIT": "bold red",
        "ERR": "red",
        "WARNING": "yellow",
        "NOTICE": "green",
        "INFO": "cyan",
        "DEBUG": "dim",
    },
    "dark": {
        "EMERG": "bold white on red3",
        "ALERT": "bold red3",
        "CRIT": "bold red3",
        "ERR": "red3",
        "WARNING": "bold gold3",
        "NOTICE": "spring_green3",
        "INFO": "bright_white",
        "DEBUG": "grey42",
    },
    "neon": {
        "EMERG": "bold #ff00ff on black",
        "ALERT": "bold #ff073a",
        "CRIT": "#ff073a",
        "ERR": "#ff5f1f",
        "WARNING": "#fff700",
        "NOTICE": "#39ff14",
        "INFO": "#00ffd5",
        "DEBUG": "#7df9ff",
    },
    "pastel": {
        "EMERG": "bold plum1",
        "ALERT": "bold light_salmon1",
        "CRIT": "light_salmon1",
        "ERR": "light_pink1",
        "WARNING": "khaki1",
        "NOTICE": "pale_green1",
        "INFO": "light_sky_blue1",
        "DEBUG": "aquamarine1",
    },
}


def resolve_theme(name: str) -> dict[str, str]:
    """Return a copy of the palette called ``name`` (case-insensitive).

    Examples
    --------
    >>> resolve_theme(" Classic ")["ERR"]
    'red'
    >>> resolve_theme("sepia")
    Traceback (most recent call last):
    ...
    ValueError: Unknown console theme: 'sepia'
    """

    key = name.strip().lower()
    try:
        return dict(CONSOLE_STYLE_THEMES[key])
    except KeyError as exc:
        raise ValueError(f"Unknown console theme: {name!r}") from exc


__all__ = ["CONSOLE_STYLE_THEMES", "resolve_theme"]
