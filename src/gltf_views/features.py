# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Optional feature toggles.

Features are read once, when the package is first imported, from the
``GLTF_VIEWS_FEATURES`` environment variable (comma separated). Leaving the
variable unset enables the default set. Disabled features are absent from
the view classes rather than returning empty values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

FEATURES_ENV = "GLTF_VIEWS_FEATURES"
KNOWN_FEATURES = frozenset({"names"})
DEFAULT_FEATURES = "names"

__all__ = [
    "Features",
    "FEATURES",
    "FEATURES_ENV",
    "load_features",
]


@dataclass(frozen=True, slots=True)
class Features:
    names: bool = True


def _is_enabled(raw: str, name: str) -> bool:
    items = {part.strip().lower() for part in raw.split(",") if part.strip()}
    unknown = items - KNOWN_FEATURES
    if unknown:
        raise ValueError(
            f"{FEATURES_ENV}: unknown feature(s) {', '.join(sorted(unknown))}"
        )
    return name in items


def load_features(env: Optional[Mapping[str, str]] = None) -> Features:
    env = os.environ if env is None else env
    raw = env.get(FEATURES_ENV)
    if raw is None:
        raw = DEFAULT_FEATURES
    return Features(names=_is_enabled(raw, "names"))


FEATURES = load_features()
