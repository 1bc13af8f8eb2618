# SPDX-License-Identifier: MIT

from typing import Optional

import typer


def parse_day(day_param: Optional[str | int]) -> Optional[int]:
    """Parse a planning day number such as "15", "d15" or "day 15"."""
    if day_param is None:
        return None

    text = str(day_param).strip().lower()
    for prefix in ("day", "d"):
        if text.startswith(prefix):
            text = text[len(prefix) :].strip()
            break

    try:
        day = int(text)
    except ValueError:
        raise typer.BadParameter(f"Invalid day: {day_param}") from None
    if day < 1:
        raise typer.BadParameter(f"Day must be 1 or later, got {day}")
    return day
