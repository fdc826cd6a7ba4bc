# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Console reporting for the command line front end.

The view layer never reports. :mod:`gltf_views.cli` opens one task per
resolution pass over a document collection, and the log handler installed
by :func:`gltf_views.logging.configure_logging` forwards records here.
Backends only decide how a pass and a message look; counting lives in
:class:`Reporter`.
"""

from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterator, Optional

__all__ = [
    "TaskStatus",
    "ResolvePass",
    "Reporter",
    "set_reporter",
    "get_reporter",
    "set_verbosity",
    "get_verbosity",
    "task",
]


class TaskStatus(Enum):
    SUCCESS = auto()
    FAILED = auto()


@dataclass(slots=True)
class ResolvePass:
    """Progress of one pass, e.g. resolving every texture of a document.

    ``fallbacks`` counts the items whose optional reference resolved to a
    default record, keyed by the default kind ("sampler", "material").
    """

    name: str
    total: Optional[int] = None
    resolved: int = 0
    fallbacks: Dict[str, int] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)

    def record(self, fallback: Optional[str] = None) -> None:
        self.resolved += 1
        if fallback:
            self.fallbacks[fallback] = self.fallbacks.get(fallback, 0) + 1

    def describe(self) -> str:
        count = f" {self.resolved}/{self.total}" if self.total is not None else ""
        elapsed = time.perf_counter() - self.started
        text = f"{self.name}{count} ({elapsed:.2f}s)"
        if self.fallbacks:
            used = " ".join(f"{k}={v}" for k, v in sorted(self.fallbacks.items()))
            text += f" [defaults: {used}]"
        return text


_VERBOSITY: int = 0  # set by the CLI (-v repeats)


def set_verbosity(level: int) -> None:
    global _VERBOSITY
    _VERBOSITY = max(0, level)


def get_verbosity() -> int:
    return _VERBOSITY


class Reporter:
    """Tracks resolution passes; subclasses render them and log messages."""

    def __init__(self) -> None:
        self._passes: Dict[str, ResolvePass] = {}

    def start_task(self, task_id: str, name: str, total: int | None = None) -> None:
        rec = self._passes[task_id] = ResolvePass(name, total)
        self._started(task_id, rec)

    def advance(self, task_id: str, *, fallback: str | None = None) -> None:
        """Count one resolved item, noting the default kind it fell back to."""
        rec = self._passes.get(task_id)
        if rec is None:
            return
        rec.record(fallback)
        self._advanced(task_id, rec)

    def end_task(self, task_id: str, status: TaskStatus = TaskStatus.SUCCESS) -> None:
        rec = self._passes.pop(task_id, None)
        if rec is not None:
            self._ended(task_id, rec, status)

    def _started(self, task_id: str, rec: ResolvePass) -> None:
        pass

    def _advanced(self, task_id: str, rec: ResolvePass) -> None:
        pass

    def _ended(self, task_id: str, rec: ResolvePass, status: TaskStatus) -> None:
        pass

    def status(self, message: str) -> None:
        raise NotImplementedError

    def verbose(self, message: str, *, level: int = 1) -> None:
        pass

    def error(self, message: str) -> None:
        raise NotImplementedError

    def warning(self, message: str) -> None:
        self.status(message)

    def section(self, title: str) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        pass


_ACTIVE_REPORTER: Reporter | None = None


def set_reporter(rep: Reporter) -> None:
    global _ACTIVE_REPORTER
    _ACTIVE_REPORTER = rep


def get_reporter() -> Reporter:
    global _ACTIVE_REPORTER
    if _ACTIVE_REPORTER is None:
        from .plain import PlainReporter  # local import to avoid cycle

        _ACTIVE_REPORTER = PlainReporter(stream=sys.stderr)
    return _ACTIVE_REPORTER


@contextmanager
def task(task_id: str, name: str, total: int | None = None) -> Iterator[Reporter]:
    """Run one resolution pass; the pass fails if the block raises."""
    rep = get_reporter()
    rep.start_task(task_id, name, total)
    try:
        yield rep
    except Exception:
        rep.end_task(task_id, TaskStatus.FAILED)
        raise
    else:
        rep.end_task(task_id, TaskStatus.SUCCESS)
