# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

from __future__ import annotations

from .base import Reporter


class SilentReporter(Reporter):
    """Counts passes but prints nothing (``-r silent``)."""

    def status(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def section(self, title: str) -> None:
        pass
