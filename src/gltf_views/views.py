# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Shared behaviour of every entity view.

A view stores the owning :class:`~gltf_views.document.Document` plus the
position of its record and re-resolves the raw record on each access, so it
holds no copy of document data and stops working once the document is
released.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Optional, Type, TypeVar

from .errors import invalid_enum, missing_field
from .features import FEATURES

__all__ = ["View", "NamedView", "EntityView", "unwrap", "unwrap_enum"]

E = TypeVar("E")


def unwrap(value: Any, path: str) -> Any:
    """Return a mandatory field, or raise InvariantViolation naming ``path``."""
    if value is None:
        raise missing_field(path)
    return value


def unwrap_enum(enum_type: Type[E], value: Any, path: str) -> E:
    """Convert a mandatory raw value into ``enum_type``.

    A missing value or one outside the enumeration is an invariant
    violation: validation has already rejected both.
    """
    try:
        return enum_type(unwrap(value, path))  # type: ignore[call-arg]
    except ValueError:
        raise invalid_enum(path, value) from None


class View:
    __slots__ = ()

    def as_raw(self) -> Any:
        """Return the raw record this view reads from."""
        raise NotImplementedError

    def extras(self) -> Optional[Dict[str, Any]]:
        """Optional application specific data, passed through as stored."""
        return self.as_raw().extras

    def _key(self) -> Hashable:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class NamedView(View):
    __slots__ = ()

    def name(self) -> Optional[str]:
        """Optional user-defined name for this object."""
        return getattr(self.as_raw(), "name", None)


# Disabling the "names" feature drops name() from the class hierarchy.
EntityView: Type[View] = NamedView if FEATURES.names else View
