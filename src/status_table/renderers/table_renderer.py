"""
Table renderer for printing the status registry as a bordered table.
"""

from io import StringIO
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from ..registry import StatusRegistry

# Outer frame and header rule only, no rule between columns
BORDERS_ONLY = box.Box(
    "┌──┐\n"
    "│  │\n"
    "├──┤\n"
    "│  │\n"
    "├──┤\n"
    "├──┤\n"
    "│  │\n"
    "└──┘\n"
)


class TableRenderer:
    """Renders a StatusRegistry as a two-column `Code | Description` table."""

    CODE_HEADER = "Code"
    DESCRIPTION_HEADER = "Description"

    def __init__(self, title: Optional[str] = None):
        self.title = title

    def build_table(self, registry: StatusRegistry) -> Table:
        table = Table(title=self.title, box=BORDERS_ONLY)
        table.add_column(self.CODE_HEADER, header_style="cyan", style="red", no_wrap=True)
        table.add_column(
            self.DESCRIPTION_HEADER, header_style="yellow", style="green", no_wrap=True
        )

        for entry in registry:
            table.add_row(str(entry.code), entry.reason)

        return table

    def render(self, registry: StatusRegistry) -> str:
        """
        Render the registry to plain text.

        Args:
            registry: The registry to render, in its own order.

        Returns:
            The table as text, without color codes.
        """
        console = Console(file=StringIO(), no_color=True, width=120)
        with console.capture() as capture:
            console.print(self.build_table(registry))
        return capture.get()

    def print(self, registry: StatusRegistry, console: Optional[Console] = None) -> None:
        """Print the registry table through a rich console (stdout by default)."""
        console = console or Console()
        console.print(self.build_table(registry))
