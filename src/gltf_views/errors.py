# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Error definitions for gltf_views."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_FIELD = "E_FIELD"
E_ENUM = "E_ENUM"
E_RANGE = "E_RANGE"
E_REF = "E_REF"
E_TYPE = "E_TYPE"
E_INDEX_OUT_OF_RANGE = "E_INDEX_OUT_OF_RANGE"
E_RELEASED = "E_RELEASED"
E_CORRUPT = "E_CORRUPT"


@dataclass
class DocumentError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class CorruptDocumentError(DocumentError):
    """Raised at the validation boundary, before any view exists."""


class InvariantViolation(DocumentError):
    """A mandatory field or reference did not hold past validation."""


class DocumentReleasedError(DocumentError):
    pass


def missing_field(path: str) -> InvariantViolation:
    return InvariantViolation(
        code=E_FIELD,
        message=f"mandatory field '{path}' is absent",
        context={"path": path},
    )


def index_out_of_range(
    collection: str, index: int, length: int
) -> InvariantViolation:
    return InvariantViolation(
        code=E_INDEX_OUT_OF_RANGE,
        message=f"{collection}[{index}] does not exist",
        context={"collection": collection, "index": index, "length": length},
    )


def invalid_enum(path: str, value: Any) -> InvariantViolation:
    return InvariantViolation(
        code=E_ENUM,
        message=f"'{path}' holds unknown value {value!r}",
        context={"path": path, "value": value},
    )


__all__ = [
    "DocumentError",
    "CorruptDocumentError",
    "InvariantViolation",
    "DocumentReleasedError",
    "missing_field",
    "index_out_of_range",
    "invalid_enum",
    "E_FIELD",
    "E_ENUM",
    "E_RANGE",
    "E_REF",
    "E_TYPE",
    "E_INDEX_OUT_OF_RANGE",
    "E_RELEASED",
    "E_CORRUPT",
]
