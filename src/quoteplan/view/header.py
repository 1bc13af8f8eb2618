# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from quoteplan.view.state import get_show_header


def header(console: Console, title: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: Console to print to
        title: The report title
        sub_header: Optional sub-header text to display
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]quoteplan[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(f"[sandy_brown]{title}[/sandy_brown]", (0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[plum1]{sub_header}[/plum1]", (0, 1)))
