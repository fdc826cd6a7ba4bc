# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Document loading (glTF JSON or GLB) through pygltflib."""

from __future__ import annotations

from pathlib import Path

from pygltflib import GLTF2

from .document import Document
from .logging import get_logger

__all__ = ["load_gltf", "load_document"]

_log = get_logger("loader")


def load_gltf(path: str | Path) -> GLTF2:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    _log.debug("loading %s", p)
    return GLTF2.load(str(p))


def load_document(path: str | Path, *, validate: bool = True) -> Document:
    return Document(load_gltf(path), validate=validate)
