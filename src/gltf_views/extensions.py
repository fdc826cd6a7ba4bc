# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Per-kind wrappers over raw extension payloads.

Each wrapper holds the document (or the texture view, for usage records)
plus the payload dict and interprets only the extensions it knows. Unknown
entries stay reachable, uninterpreted, through :meth:`get`. A known
extension whose payload has the wrong shape reads as absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Tuple

from .logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from .document import Document
    from .image import Image
    from .texture import Texture

__all__ = [
    "Extensions",
    "SamplerExtensions",
    "TextureExtensions",
    "InfoExtensions",
    "ImageExtensions",
    "MaterialExtensions",
    "TextureTransform",
    "KHR_TEXTURE_BASISU",
    "EXT_TEXTURE_WEBP",
    "MSFT_TEXTURE_DDS",
    "KHR_TEXTURE_TRANSFORM",
    "KHR_MATERIALS_EMISSIVE_STRENGTH",
]

KHR_TEXTURE_BASISU = "KHR_texture_basisu"
EXT_TEXTURE_WEBP = "EXT_texture_webp"
MSFT_TEXTURE_DDS = "MSFT_texture_dds"
KHR_TEXTURE_TRANSFORM = "KHR_texture_transform"
KHR_MATERIALS_EMISSIVE_STRENGTH = "KHR_materials_emissive_strength"

_log = get_logger("extensions")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _pair(value: Any) -> Optional[Tuple[float, float]]:
    if (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(_is_number(v) for v in value)
    ):
        return (float(value[0]), float(value[1]))
    return None


class Extensions:
    """Behaviour shared by every extension wrapper."""

    __slots__ = ("_payload",)

    def __init__(self, payload: Optional[Dict[str, Any]]) -> None:
        self._payload = payload

    def as_raw(self) -> Optional[Dict[str, Any]]:
        return self._payload

    def names(self) -> List[str]:
        return list(self._payload or ())

    def get(self, name: str) -> Any:
        """Raw payload of one extension, uninterpreted."""
        if not self._payload:
            return None
        return self._payload.get(name)

    def __contains__(self, name: object) -> bool:
        return bool(self._payload) and name in self._payload  # type: ignore[operator]

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._payload or ())

    def _object(self, name: str) -> Optional[Dict[str, Any]]:
        value = self.get(name)
        if value is None:
            return None
        if not isinstance(value, dict):
            _log.debug(
                "%s: ignoring %s payload of type %s",
                type(self).__name__,
                name,
                type(value).__name__,
            )
            return None
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names()})"


class _DocumentExtensions(Extensions):
    __slots__ = ("document",)

    def __init__(
        self, document: "Document", payload: Optional[Dict[str, Any]]
    ) -> None:
        super().__init__(payload)
        self.document = document


class SamplerExtensions(_DocumentExtensions):
    __slots__ = ()


class ImageExtensions(_DocumentExtensions):
    __slots__ = ()


class TextureExtensions(_DocumentExtensions):
    """Texture extensions, including alternate image sources."""

    __slots__ = ()

    SOURCE_EXTENSIONS = (KHR_TEXTURE_BASISU, EXT_TEXTURE_WEBP, MSFT_TEXTURE_DDS)

    def _source(self, name: str) -> Optional["Image"]:
        obj = self._object(name)
        if obj is None:
            return None
        index = obj.get("source")
        if not isinstance(index, int) or isinstance(index, bool):
            _log.debug("%s: 'source' is not an index: %r", name, index)
            return None
        return self.document.image(index)

    def texture_basisu(self) -> Optional["Image"]:
        return self._source(KHR_TEXTURE_BASISU)

    def texture_webp(self) -> Optional["Image"]:
        return self._source(EXT_TEXTURE_WEBP)

    def texture_dds(self) -> Optional["Image"]:
        return self._source(MSFT_TEXTURE_DDS)

    def alternate_source(self) -> Optional["Image"]:
        """First alternate image found, in SOURCE_EXTENSIONS order."""
        for name in self.SOURCE_EXTENSIONS:
            image = self._source(name)
            if image is not None:
                return image
        return None


@dataclass(frozen=True, slots=True)
class TextureTransform:
    """``KHR_texture_transform`` values with their documented defaults."""

    offset: Tuple[float, float] = (0.0, 0.0)
    rotation: float = 0.0
    scale: Tuple[float, float] = (1.0, 1.0)
    tex_coord: Optional[int] = None


class InfoExtensions(Extensions):
    """Extensions of a texture usage record.

    Holds its own copy of the texture view so extension data can be read
    against the texture it applies to.
    """

    __slots__ = ("_texture",)

    def __init__(
        self, texture: "Texture", payload: Optional[Dict[str, Any]]
    ) -> None:
        super().__init__(payload)
        self._texture = texture

    def texture(self) -> "Texture":
        return self._texture

    def texture_transform(self) -> Optional[TextureTransform]:
        obj = self._object(KHR_TEXTURE_TRANSFORM)
        if obj is None:
            return None
        offset = _pair(obj.get("offset", (0.0, 0.0)))
        scale = _pair(obj.get("scale", (1.0, 1.0)))
        rotation = obj.get("rotation", 0.0)
        tex_coord = obj.get("texCoord")
        if offset is None or scale is None or not _is_number(rotation):
            _log.debug("%s: malformed payload %r", KHR_TEXTURE_TRANSFORM, obj)
            return None
        if tex_coord is not None and (
            not isinstance(tex_coord, int)
            or isinstance(tex_coord, bool)
            or tex_coord < 0
        ):
            _log.debug("%s: bad texCoord %r", KHR_TEXTURE_TRANSFORM, tex_coord)
            return None
        return TextureTransform(
            offset=offset,
            rotation=float(rotation),
            scale=scale,
            tex_coord=tex_coord,
        )


class MaterialExtensions(_DocumentExtensions):
    __slots__ = ()

    def emissive_strength(self) -> Optional[float]:
        obj = self._object(KHR_MATERIALS_EMISSIVE_STRENGTH)
        if obj is None:
            return None
        value = obj.get("emissiveStrength", 1.0)
        if not _is_number(value) or value < 0:
            _log.debug("%s: bad emissiveStrength %r", KHR_MATERIALS_EMISSIVE_STRENGTH, value)
            return None
        return float(value)
