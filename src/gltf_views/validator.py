# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Validation boundary run before the first view over a document exists.

Phases:
 1. schema: collection types, mandatory fields, closed enumerations, factor
    arity and number types
 2. semantic: every index reference resolves inside its collection

The pipeline reads the document as parsed and never writes to it. Fields
the glTF schema defaults when omitted (wrap modes, alphaMode, texCoord,
factors) may be absent here; :func:`~gltf_views.schema.apply_schema_defaults`
fills them once validation has passed.

Returns a list of ValidationErrorRecord; an empty list means every
invariant the views unwrap holds after defaults are applied.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Type

from pygltflib import GLTF2

from .extensions import TextureExtensions
from .errors import E_ENUM, E_FIELD, E_RANGE, E_REF, E_TYPE
from .schema import (
    AlphaMode,
    MagFilter,
    MinFilter,
    WrappingMode,
    iter_texture_infos,
)

COLLECTIONS = ("samplers", "textures", "images", "materials")

TEXTURE_SOURCE_EXTENSIONS = TextureExtensions.SOURCE_EXTENSIONS


class ValidationErrorRecord:
    def __init__(self, code: str, message: str, path: str = "") -> None:
        self.code = code
        self.message = message
        self.path = path

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "path": self.path}

    def __repr__(self) -> str:
        return f"ValidationErrorRecord(code={self.code}, path={self.path}, message={self.message})"


def _err(
    errors: List[ValidationErrorRecord], code: str, message: str, path: str
) -> None:
    errors.append(ValidationErrorRecord(code, message, path))


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_enum(
    errors: List[ValidationErrorRecord], enum_type: Type, value: Any, path: str
) -> None:
    """Flag a present value outside the closed enumeration; absence is fine."""
    if value is None:
        return
    try:
        enum_type(value)
    except ValueError:
        _err(errors, E_ENUM, f"Unknown {enum_type.__name__} {value!r}", path)


def _check_number(errors: List[ValidationErrorRecord], value: Any, path: str) -> None:
    if value is not None and not _is_number(value):
        _err(errors, E_TYPE, f"Expected a number, got {value!r}", path)


def _check_factor(
    errors: List[ValidationErrorRecord], value: Any, arity: int, path: str
) -> None:
    """A color factor is a list of exactly ``arity`` numbers."""
    if value is None:
        return
    if not isinstance(value, (list, tuple)) or not all(_is_number(v) for v in value):
        _err(errors, E_TYPE, f"Expected a list of {arity} numbers", path)
    elif len(value) != arity:
        _err(errors, E_RANGE, f"Expected {arity} components, got {len(value)}", path)


def _check_ref(
    errors: List[ValidationErrorRecord],
    value: Any,
    target: Sequence[Any],
    target_name: str,
    path: str,
) -> None:
    if value is None:
        return
    if not _is_index(value) or not 0 <= value < len(target):
        _err(
            errors,
            E_REF,
            f"Reference {value!r} outside {target_name} (len={len(target)})",
            path,
        )


def _schema_phase(gltf: GLTF2) -> List[ValidationErrorRecord]:
    errors: List[ValidationErrorRecord] = []
    for key in COLLECTIONS:
        value = getattr(gltf, key, None)
        if value is not None and not isinstance(value, list):
            _err(errors, E_TYPE, f"'{key}' must be a list", key)
    if errors:
        return errors

    for i, s in enumerate(gltf.samplers or []):
        path = f"samplers[{i}]"
        _check_enum(errors, MagFilter, s.magFilter, path + ".magFilter")
        _check_enum(errors, MinFilter, s.minFilter, path + ".minFilter")
        _check_enum(errors, WrappingMode, s.wrapS, path + ".wrapS")
        _check_enum(errors, WrappingMode, s.wrapT, path + ".wrapT")

    for i, t in enumerate(gltf.textures or []):
        if t.source is None:
            _err(errors, E_FIELD, "Texture has no source image", f"textures[{i}].source")

    for i, img in enumerate(gltf.images or []):
        path = f"images[{i}]"
        if img.uri is None and img.bufferView is None:
            _err(errors, E_FIELD, "Image needs a uri or a bufferView", path)
        elif img.bufferView is not None and not img.mimeType:
            _err(errors, E_FIELD, "bufferView image needs a mimeType", path + ".mimeType")

    for i, m in enumerate(gltf.materials or []):
        path = f"materials[{i}]"
        _check_enum(errors, AlphaMode, m.alphaMode, path + ".alphaMode")
        _check_number(errors, m.alphaCutoff, path + ".alphaCutoff")
        _check_factor(errors, m.emissiveFactor, 3, path + ".emissiveFactor")
        pbr = m.pbrMetallicRoughness
        if pbr is not None:
            path += ".pbrMetallicRoughness"
            _check_factor(errors, pbr.baseColorFactor, 4, path + ".baseColorFactor")
            _check_number(errors, pbr.metallicFactor, path + ".metallicFactor")
            _check_number(errors, pbr.roughnessFactor, path + ".roughnessFactor")

    for path, info in iter_texture_infos(gltf):
        if info.index is None:
            _err(errors, E_FIELD, "Texture usage without a texture", path + ".index")
        tex_coord = info.texCoord
        if tex_coord is not None and (not _is_index(tex_coord) or tex_coord < 0):
            _err(errors, E_RANGE, "texCoord must be a non-negative integer", path + ".texCoord")
    return errors


def _semantic_phase(gltf: GLTF2) -> List[ValidationErrorRecord]:
    errors: List[ValidationErrorRecord] = []
    samplers = gltf.samplers or []
    images = gltf.images or []
    textures = gltf.textures or []
    buffer_views = gltf.bufferViews or []

    for i, t in enumerate(textures):
        path = f"textures[{i}]"
        _check_ref(errors, t.sampler, samplers, "samplers", path + ".sampler")
        _check_ref(errors, t.source, images, "images", path + ".source")
        for name in TEXTURE_SOURCE_EXTENSIONS:
            payload = (t.extensions or {}).get(name)
            if not isinstance(payload, dict):
                continue
            # a non-index source reads as absent through TextureExtensions
            source = payload.get("source")
            if _is_index(source):
                _check_ref(
                    errors, source, images, "images", f"{path}.extensions.{name}.source"
                )

    for i, img in enumerate(images):
        _check_ref(
            errors, img.bufferView, buffer_views, "bufferViews", f"images[{i}].bufferView"
        )

    for path, info in iter_texture_infos(gltf):
        _check_ref(errors, info.index, textures, "textures", path + ".index")
    return errors


def run_validation_pipeline(gltf: GLTF2) -> List[ValidationErrorRecord]:
    errors = _schema_phase(gltf)
    if any(e.code == E_TYPE and e.path in COLLECTIONS for e in errors):
        return errors
    errors.extend(_semantic_phase(gltf))
    return errors


def summarize(errors: List[ValidationErrorRecord]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for e in errors:
        counts[e.code] = counts.get(e.code, 0) + 1
    return counts


__all__ = [
    "ValidationErrorRecord",
    "run_validation_pipeline",
    "summarize",
    "TEXTURE_SOURCE_EXTENSIONS",
]
