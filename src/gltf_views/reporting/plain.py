# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

from __future__ import annotations

import sys
from typing import TextIO

from .base import Reporter, ResolvePass, TaskStatus, get_verbosity


class PlainReporter(Reporter):
    """Line oriented reporter; ANSI color only on a terminal."""

    def __init__(self, stream: TextIO | None = None, use_color: bool | None = None):
        super().__init__()
        self.stream = stream or sys.stderr
        if use_color is None:
            use_color = getattr(self.stream, "isatty", lambda: False)()
        self.use_color = use_color

    def _c(self, code: str, text: str) -> str:
        if not self.use_color:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def _ended(self, task_id: str, rec: ResolvePass, status: TaskStatus) -> None:
        icon = self._c("32", "ok") if status is TaskStatus.SUCCESS else self._c("31", "FAILED")
        self.stream.write(f" {icon} {rec.describe()}\n")

    def status(self, message: str) -> None:
        self.stream.write(f"{self._c('32', 'INFO')}: {message}\n")

    def verbose(self, message: str, *, level: int = 1) -> None:
        if get_verbosity() >= level:
            self.stream.write(f"{self._c('36', 'DEBUG')}: {message}\n")

    def error(self, message: str) -> None:
        self.stream.write(f"{self._c('31', 'ERROR')}: {message}\n")

    def warning(self, message: str) -> None:
        self.stream.write(f"{self._c('33', 'WARN')}: {message}\n")

    def section(self, title: str) -> None:
        self.stream.write(f"\n[{title}]\n")
