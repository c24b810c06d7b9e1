"""Shared console output for batch decoding runs.

A run prints one block per input file and a summary panel at the end:

- StructuredBlock: indented key/value lines under a bold title
- BasePipelineLogger: python-logging passthrough, blocks and the summary
  panel; subclasses add their own reporting and ``summary()``
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Generator

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from discord_models.utils.logging import console

if TYPE_CHECKING:
    from typing import Self

INDENT = "    "


class StructuredBlock:
    """Key/value output for one unit of work, usually one input file.

    Usage:
        with logger.block("ready.json") as block:
            block.field("payloads", 3)
            block.result("decoded 3 of 3 payloads")

    Output:
        ready.json
            payloads: 3
            ✓ decoded 3 of 3 payloads
    """

    def __init__(self, title: str, parent: "BasePipelineLogger") -> None:
        self.title = title
        self.console = parent.console

    def __enter__(self) -> "Self":
        self.console.print(f"\n[bold]{self.title}[/bold]")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        return None

    def _line(self, text: str) -> None:
        self.console.print(f"{INDENT}{text}")

    def field(self, key: str, value: Any, color: str | None = None) -> None:
        shown = f"[{color}]{value}[/{color}]" if color else f"{value}"
        self._line(f"[dim]{key}:[/dim] {shown}")

    def result(self, message: str, success: bool = True) -> None:
        mark = "[green]✓[/green]" if success else "[red]✗[/red]"
        self._line(f"{mark} {message}")

    def skip(self, reason: str) -> None:
        self._line(f"[dim]Skipped: {reason}[/dim]")

    def empty(self) -> None:
        self._line("[dim]Empty, skipping[/dim]")


class BasePipelineLogger(ABC):
    """Base for run loggers.

    Plain messages go through the standard ``logging`` module so they reach
    the rich handler and any log file; blocks, success marks and the summary
    panel are printed straight to the shared console.
    """

    def __init__(self, logger_name: str | None = None) -> None:
        self.console: Console = console
        self._logger = logging.getLogger(logger_name or self.__class__.__module__)

    @contextmanager
    def block(self, title: str) -> Generator[StructuredBlock, None, None]:
        with StructuredBlock(title, self) as block:
            yield block

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def print_summary(
        self,
        pipeline_name: str,
        *,
        elapsed: float,
        stats: dict[str, int | str],
        extra_sections: dict[str, dict[str, int]] | None = None,
        style: str = "cyan",
    ) -> None:
        """Print the end-of-run panel.

        Args:
            pipeline_name: Panel title prefix, rendered as "<name> Complete"
            elapsed: Wall time of the run in seconds
            stats: Top-level counters, in display order
            extra_sections: Named groups of counters shown indented below
            style: Border colour
        """
        table = Table.grid(padding=(0, 2))
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right", style="green")

        def add(label: str, value: int | str) -> None:
            table.add_row(label, f"{value:,}" if isinstance(value, int) else value)

        for label, value in stats.items():
            add(label, value)
        for section, counters in (extra_sections or {}).items():
            add(f"[dim]{section}[/dim]", "")
            for label, value in counters.items():
                add(f"  {label}", value)
        add("Time elapsed", f"{elapsed:.1f}s")

        self.console.print()
        self.console.print(
            Panel(
                table,
                title=f"[bold]{pipeline_name} Complete[/bold]",
                border_style=style,
                padding=(1, 2),
            )
        )

    @abstractmethod
    def summary(self, **kwargs: Any) -> None:
        """Print the run's summary panel."""
        ...
