# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Canonical default records substituted for absent optional references.

Each default is built at most once per process from the documented glTF
defaults, under a lock, and the same object is handed out afterwards. The
records are sealed once built, so attribute writes raise ``AttributeError``.
Their factors are tuples and their payloads are read-only mappings.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Callable, Dict

from pygltflib import Material, PbrMetallicRoughness, Sampler

from .schema import (
    DEFAULT_ALPHA_CUTOFF,
    DEFAULT_BASE_COLOR_FACTOR,
    DEFAULT_EMISSIVE_FACTOR,
    DEFAULT_WRAP,
    AlphaMode,
)

__all__ = ["DefaultRegistry", "DEFAULTS", "DefaultSampler", "DefaultMaterial"]


class _Sealed:
    """Record mixin that rejects attribute writes after :meth:`_seal`."""

    _sealed = False

    def __setattr__(self, name: str, value: Any) -> None:
        if self._sealed:
            raise AttributeError(f"default {type(self).__name__} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._sealed:
            raise AttributeError(f"default {type(self).__name__} is read-only")
        super().__delattr__(name)

    def _seal(self) -> "_Sealed":
        object.__setattr__(self, "_sealed", True)
        return self


class DefaultSampler(_Sealed, Sampler):
    pass


class DefaultPbrMetallicRoughness(_Sealed, PbrMetallicRoughness):
    pass


class DefaultMaterial(_Sealed, Material):
    pass


def _empty() -> MappingProxyType:
    return MappingProxyType({})


def _make_sampler() -> Sampler:
    return DefaultSampler(
        wrapS=int(DEFAULT_WRAP),
        wrapT=int(DEFAULT_WRAP),
        extensions=_empty(),
        extras=_empty(),
    )._seal()


def _make_material() -> Material:
    pbr = DefaultPbrMetallicRoughness(
        baseColorFactor=tuple(DEFAULT_BASE_COLOR_FACTOR),
        metallicFactor=1.0,
        roughnessFactor=1.0,
        extensions=_empty(),
        extras=_empty(),
    )._seal()
    return DefaultMaterial(
        pbrMetallicRoughness=pbr,
        emissiveFactor=tuple(DEFAULT_EMISSIVE_FACTOR),
        alphaMode=AlphaMode.OPAQUE.value,
        alphaCutoff=DEFAULT_ALPHA_CUTOFF,
        doubleSided=False,
        extensions=_empty(),
        extras=_empty(),
    )._seal()

class DefaultRegistry:
    _FACTORIES: Dict[str, Callable[[], Any]] = {
        "sampler": _make_sampler,
        "material": _make_material,
    }

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._instances: Dict[str, Any] = {}

    def get(self, kind: str) -> Any:
        instance = self._instances.get(kind)
        if instance is not None:
            return instance
        factory = self._FACTORIES[kind]
        with self._lock:
            # another thread may have won the race while we waited
            instance = self._instances.get(kind)
            if instance is None:
                instance = factory()
                self._instances[kind] = instance
        return instance

    def sampler(self) -> Sampler:
        return self.get("sampler")

    def material(self) -> Material:
        return self.get("material")

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._FACTORIES)


DEFAULTS = DefaultRegistry()
