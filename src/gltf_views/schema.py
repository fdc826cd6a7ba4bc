# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""glTF 2.0 closed enumerations and schema defaults.

The raw document model (:mod:`pygltflib`) stores enumerations as plain GL
integers and leaves most schema-defaulted fields as ``None`` when the source
omits them. :func:`apply_schema_defaults` is the parse-stage normalisation
that substitutes the documented default for such fields, so that the view
layer can treat them as always present.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Iterator, Tuple

from pygltflib import GLTF2, PbrMetallicRoughness

__all__ = [
    "MagFilter",
    "MinFilter",
    "WrappingMode",
    "AlphaMode",
    "DEFAULT_WRAP",
    "DEFAULT_TEX_COORD",
    "DEFAULT_ALPHA_CUTOFF",
    "DEFAULT_BASE_COLOR_FACTOR",
    "DEFAULT_EMISSIVE_FACTOR",
    "TEXTURE_SLOTS",
    "apply_schema_defaults",
    "iter_texture_infos",
]


class MagFilter(IntEnum):
    NEAREST = 9728
    LINEAR = 9729


class MinFilter(IntEnum):
    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class WrappingMode(IntEnum):
    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648
    REPEAT = 10497


class AlphaMode(str, Enum):
    OPAQUE = "OPAQUE"
    MASK = "MASK"
    BLEND = "BLEND"


DEFAULT_WRAP = WrappingMode.REPEAT
DEFAULT_TEX_COORD = 0
DEFAULT_ALPHA_CUTOFF = 0.5
DEFAULT_NORMAL_SCALE = 1.0
DEFAULT_OCCLUSION_STRENGTH = 1.0
DEFAULT_BASE_COLOR_FACTOR = (1.0, 1.0, 1.0, 1.0)
DEFAULT_EMISSIVE_FACTOR = (0.0, 0.0, 0.0)

# (owner, attribute) pairs naming the texture slots of a material; owner
# "pbr" is the material's pbrMetallicRoughness block.
TEXTURE_SLOTS: Tuple[Tuple[str, str], ...] = (
    ("pbr", "baseColorTexture"),
    ("pbr", "metallicRoughnessTexture"),
    ("material", "normalTexture"),
    ("material", "occlusionTexture"),
    ("material", "emissiveTexture"),
)


def _fill(record: Any, attr: str, value: Any) -> int:
    if getattr(record, attr, None) is None:
        setattr(record, attr, value)
        return 1
    return 0


def iter_texture_infos(gltf: GLTF2) -> Iterator[Tuple[str, Any]]:
    """Yield ``(path, record)`` for every texture-usage record present."""
    for m_idx, material in enumerate(gltf.materials or []):
        pbr = getattr(material, "pbrMetallicRoughness", None)
        for owner, attr in TEXTURE_SLOTS:
            holder = pbr if owner == "pbr" else material
            info = getattr(holder, attr, None) if holder is not None else None
            if info is None:
                continue
            prefix = f"materials[{m_idx}]"
            if owner == "pbr":
                prefix += ".pbrMetallicRoughness"
            yield f"{prefix}.{attr}", info


def apply_schema_defaults(gltf: GLTF2) -> int:
    """Fill omitted schema-defaulted fields in place.

    Only fields that are ``None`` are touched; values the source document
    carries are never rewritten. Returns the number of fields filled.
    """
    filled = 0
    for sampler in gltf.samplers or []:
        filled += _fill(sampler, "wrapS", int(DEFAULT_WRAP))
        filled += _fill(sampler, "wrapT", int(DEFAULT_WRAP))

    for material in gltf.materials or []:
        filled += _fill(material, "alphaMode", AlphaMode.OPAQUE.value)
        filled += _fill(material, "alphaCutoff", DEFAULT_ALPHA_CUTOFF)
        filled += _fill(material, "doubleSided", False)
        filled += _fill(
            material, "emissiveFactor", list(DEFAULT_EMISSIVE_FACTOR)
        )
        filled += _fill(material, "pbrMetallicRoughness", PbrMetallicRoughness())
        pbr = material.pbrMetallicRoughness
        filled += _fill(pbr, "baseColorFactor", list(DEFAULT_BASE_COLOR_FACTOR))
        filled += _fill(pbr, "metallicFactor", 1.0)
        filled += _fill(pbr, "roughnessFactor", 1.0)

    for path, info in iter_texture_infos(gltf):
        filled += _fill(info, "texCoord", DEFAULT_TEX_COORD)
        if path.endswith(".normalTexture"):
            filled += _fill(info, "scale", DEFAULT_NORMAL_SCALE)
        elif path.endswith(".occlusionTexture"):
            filled += _fill(info, "strength", DEFAULT_OCCLUSION_STRENGTH)

    return filled
