# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Material views and their texture slots."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, Optional, Tuple, Type, TypeVar

from .extensions import MaterialExtensions
from .schema import AlphaMode
from .texture import Info, NormalTexture, OcclusionTexture
from .views import EntityView, View, unwrap, unwrap_enum

if TYPE_CHECKING:  # pragma: no cover
    from .document import Document

__all__ = ["AlphaMode", "Material", "PbrMetallicRoughness"]

InfoT = TypeVar("InfoT", bound=Info)


class Material(EntityView):
    """The material appearance of a primitive.

    ``index()`` is ``None`` for the default material.
    """

    __slots__ = ("document", "_index")

    def __init__(self, document: "Document", index: Optional[int]) -> None:
        self.document = document
        self._index = index

    @classmethod
    def default(cls, document: "Document") -> "Material":
        return cls(document, None)

    def index(self) -> Optional[int]:
        return self._index

    def as_raw(self) -> Any:
        if self._index is None:
            return self.document.default_material_record()
        return self.document.record("materials", self._index)

    def _path(self, field: str) -> str:
        if self._index is None:
            return f"<default material>.{field}"
        return f"materials[{self._index}].{field}"

    def _info(self, cls: Type[InfoT], record: Any, path: str) -> Optional[InfoT]:
        if record is None:
            return None
        index = unwrap(record.index, path + ".index")
        return cls(self.document.texture(index), record)

    def alpha_mode(self) -> AlphaMode:
        return unwrap_enum(AlphaMode, self.as_raw().alphaMode, self._path("alphaMode"))

    def alpha_cutoff(self) -> float:
        """Alpha threshold; only meaningful when alpha_mode() is MASK."""
        return unwrap(self.as_raw().alphaCutoff, self._path("alphaCutoff"))

    def double_sided(self) -> bool:
        return bool(unwrap(self.as_raw().doubleSided, self._path("doubleSided")))

    def emissive_factor(self) -> Tuple[float, float, float]:
        r, g, b = unwrap(self.as_raw().emissiveFactor, self._path("emissiveFactor"))
        return (r, g, b)

    def pbr_metallic_roughness(self) -> "PbrMetallicRoughness":
        return PbrMetallicRoughness(self)

    def normal_texture(self) -> Optional[NormalTexture]:
        return self._info(
            NormalTexture, self.as_raw().normalTexture, self._path("normalTexture")
        )

    def occlusion_texture(self) -> Optional[OcclusionTexture]:
        return self._info(
            OcclusionTexture,
            self.as_raw().occlusionTexture,
            self._path("occlusionTexture"),
        )

    def emissive_texture(self) -> Optional[Info]:
        return self._info(
            Info, self.as_raw().emissiveTexture, self._path("emissiveTexture")
        )

    def extensions(self) -> MaterialExtensions:
        return MaterialExtensions(self.document, self.as_raw().extensions)

    def _key(self) -> Hashable:
        return (id(self.document), self._index)

    def __repr__(self) -> str:
        return f"Material(index={self._index})"


class PbrMetallicRoughness(View):
    """Metallic-roughness parameters of a material."""

    __slots__ = ("_material",)

    def __init__(self, material: Material) -> None:
        self._material = material

    def material(self) -> Material:
        return self._material

    def as_raw(self) -> Any:
        return unwrap(
            self._material.as_raw().pbrMetallicRoughness,
            self._material._path("pbrMetallicRoughness"),
        )

    def _path(self, field: str) -> str:
        return self._material._path(f"pbrMetallicRoughness.{field}")

    def base_color_factor(self) -> Tuple[float, float, float, float]:
        r, g, b, a = unwrap(self.as_raw().baseColorFactor, self._path("baseColorFactor"))
        return (r, g, b, a)

    def base_color_texture(self) -> Optional[Info]:
        return self._material._info(
            Info, self.as_raw().baseColorTexture, self._path("baseColorTexture")
        )

    def metallic_factor(self) -> float:
        return unwrap(self.as_raw().metallicFactor, self._path("metallicFactor"))

    def roughness_factor(self) -> float:
        return unwrap(self.as_raw().roughnessFactor, self._path("roughnessFactor"))

    def metallic_roughness_texture(self) -> Optional[Info]:
        return self._material._info(
            Info,
            self.as_raw().metallicRoughnessTexture,
            self._path("metallicRoughnessTexture"),
        )

    def _key(self) -> Hashable:
        return self._material._key()
