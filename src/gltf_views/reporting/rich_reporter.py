# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

from __future__ import annotations

import os
from typing import Any, Dict

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from .base import Reporter, ResolvePass, TaskStatus, get_verbosity

_STATUS_ICON = {
    TaskStatus.SUCCESS: "[green]✔[/]",
    TaskStatus.FAILED: "[red]✖[/]",
}


class RichReporter(Reporter):
    """Progress bars per resolution pass on a rich console.

    ``GLTF_VIEWS_PROGRESS_TRANSIENT=1`` clears finished bars.
    """

    def __init__(self, console: Console | None = None):
        super().__init__()
        self.console = console or Console(stderr=True, highlight=False, soft_wrap=False)
        self._transient = os.getenv("GLTF_VIEWS_PROGRESS_TRANSIENT", "0").lower() in (
            "1",
            "true",
            "yes",
        )
        self.progress: Progress | None = None
        self._bars: Dict[str, Any] = {}

    def _ensure_progress(self) -> Progress:
        if self.progress is None:
            self.progress = Progress(
                SpinnerColumn(spinner_name="dots"),
                TextColumn("{task.description}", justify="left"),
                BarColumn(bar_width=None),
                TextColumn("{task.completed}/{task.total}"),
                TimeElapsedColumn(),
                transient=self._transient,
                console=self.console,
                expand=True,
            )
            self.progress.start()
        return self.progress

    def _stop_progress(self) -> None:
        if self.progress is not None:
            try:
                self.progress.stop()
            finally:
                self.progress = None
                self._bars.clear()

    def _started(self, task_id: str, rec: ResolvePass) -> None:
        # passes without a known size (loading) get a header, not a bar
        if rec.total is None:
            self.console.rule(rec.name)
            return
        self._bars[task_id] = self._ensure_progress().add_task(rec.name, total=rec.total)

    def _advanced(self, task_id: str, rec: ResolvePass) -> None:
        bar = self._bars.get(task_id)
        if bar is not None and self.progress is not None:
            self.progress.update(bar, completed=rec.resolved)

    def _ended(self, task_id: str, rec: ResolvePass, status: TaskStatus) -> None:
        self._bars.pop(task_id, None)
        if not self._bars:
            self._stop_progress()
        self.console.print(f"{_STATUS_ICON[status]} {rec.describe()}")

    def status(self, message: str) -> None:
        self.console.print(f"[green]INFO[/]: {message}")

    def verbose(self, message: str, *, level: int = 1) -> None:
        if get_verbosity() >= level:
            self.console.print(f"[cyan]DEBUG[/]: {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]ERROR[/]: {message}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]WARN[/]: {message}")

    def section(self, title: str) -> None:
        self.console.rule(title)

    def flush(self) -> None:
        self._stop_progress()
