"""Console output for the ospath command line.

This module provides console output with theme support, falling back to
plain text when the output is not a terminal so results stay pipeable.
"""

import json
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    ERROR = ("[x]", "error", "red")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    error: str
    highlight: str
    path: str
    dim: str
    true_value: str = "green"
    false_value: str = "red"


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        error='red',
        highlight='bright_cyan',
        path='white',
        dim='bright_black',
    ),
    'green': ThemeColors(
        info='green',
        error='red',
        highlight='bold green',
        path='bright_green',
        dim='green',
        true_value='bright_green',
    ),
    'matrix': ThemeColors(
        info='bright_green',
        error='red',
        highlight='bold bright_green',
        path='green',
        dim='green',
        true_value='bright_green',
    ),
    'sunset': ThemeColors(
        info='orange3',
        error='red3',
        highlight='bold orange1',
        path='wheat1',
        dim='grey50',
        false_value='red3',
    ),
}


class ConsoleManager:
    """Console with theme support and Rich/plain switching."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_plain: Force plain output even on a terminal
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout
        self.use_rich = not force_plain and self._should_use_rich_terminal()

        if self.use_rich:
            self.console = Console(
                theme=self._create_rich_theme(),
                file=self.file,
                highlight=False
            )
        else:
            self.console = None

    def _should_use_rich_terminal(self) -> bool:
        """Use Rich only on an interactive terminal that allows color."""
        if os.environ.get('NO_COLOR'):
            return False
        return hasattr(self.file, 'isatty') and self.file.isatty()

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        return Theme({
            'info': self.theme_colors.info,
            'error': self.theme_colors.error,
            'highlight': self.theme_colors.highlight,
            'path': self.theme_colors.path,
            'dim': self.theme_colors.dim,
            'true': self.theme_colors.true_value,
            'false': self.theme_colors.false_value,
        })

    def print_path(self, path: str):
        """Print a single path result verbatim."""
        if self.use_rich:
            self.console.print(Text(path, style="path"))
        else:
            print(path, file=self.file)

    def print_json(self, data: Any):
        """Print data as JSON."""
        print(json.dumps(data, indent=2), file=self.file)

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, _, color = status.value

        if self.use_rich:
            status_text = Text()
            status_text.append(f"{icon} ", style=color)
            status_text.append(message)
            self.console.print(status_text)
        else:
            print(f"{icon} {message}", file=self.file)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_flags(self, title: str, flags: Dict[str, bool]):
        """Print a table of named boolean results."""
        if self.use_rich:
            table = Table(title=Text(title), show_header=False, title_style="highlight")
            table.add_column("check", style="info")
            table.add_column("value")
            for name, value in flags.items():
                table.add_row(name, Text(str(value).lower(), style="true" if value else "false"))
            self.console.print(table)
        else:
            print(title, file=self.file)
            width = max((len(name) for name in flags), default=0)
            for name, value in flags.items():
                print(f"  {name.ljust(width)}  {str(value).lower()}", file=self.file)
