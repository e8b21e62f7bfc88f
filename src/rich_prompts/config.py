"""Process-wide settings read from the environment.

Per-prompt options are constructor keyword arguments. The few settings that
apply to every prompt in a process come from environment variables:

- RICH_PROMPTS_THEME: "default" or "plain".
- NO_COLOR: any non-empty value selects the plain theme.
- RICH_PROMPTS_MAX_ROWS: cap on visible list rows.
"""

from __future__ import annotations

import os

THEME_ENV = "RICH_PROMPTS_THEME"
MAX_ROWS_ENV = "RICH_PROMPTS_MAX_ROWS"
NO_COLOR_ENV = "NO_COLOR"

DEFAULT_THEME_NAME = "default"
PLAIN_THEME_NAME = "plain"


def get_theme_name() -> str:
    """Return the theme name selected by the environment.

    RICH_PROMPTS_THEME wins when set; otherwise NO_COLOR selects the plain
    theme. Unknown names are returned as-is and resolved by the caller.
    """
    raw = (os.environ.get(THEME_ENV) or "").strip()
    if raw:
        return raw.lower().replace("_", "-")
    if os.environ.get(NO_COLOR_ENV):
        return PLAIN_THEME_NAME
    return DEFAULT_THEME_NAME


def get_max_rows() -> int | None:
    """Return the visible-row cap from RICH_PROMPTS_MAX_ROWS, or None.

    Non-numeric and non-positive values are ignored.
    """
    raw = (os.environ.get(MAX_ROWS_ENV) or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None
