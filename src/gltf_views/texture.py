# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Texture, sampler and texture-usage views."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, Optional, Protocol, runtime_checkable

from .extensions import InfoExtensions, SamplerExtensions, TextureExtensions
from .features import FEATURES
from .schema import MagFilter, MinFilter, WrappingMode
from .views import EntityView, View, unwrap, unwrap_enum

if TYPE_CHECKING:  # pragma: no cover
    from .document import Document
    from .image import Image

__all__ = [
    "MagFilter",
    "MinFilter",
    "WrappingMode",
    "Sampler",
    "Texture",
    "TextureLike",
    "Info",
    "NormalTexture",
    "OcclusionTexture",
]


class Sampler(EntityView):
    """Texture sampler properties for filtering and wrapping modes.

    ``index()`` is ``None`` for the default sampler, which stands in for a
    texture that references no sampler.
    """

    __slots__ = ("document", "_index")

    def __init__(self, document: "Document", index: Optional[int]) -> None:
        self.document = document
        self._index = index

    @classmethod
    def default(cls, document: "Document") -> "Sampler":
        """The view over the shared default sampler of ``document``."""
        return cls(document, None)

    def index(self) -> Optional[int]:
        """Position in ``samplers``, or ``None`` for the default sampler."""
        return self._index

    def is_default(self) -> bool:
        return self._index is None

    def as_raw(self) -> Any:
        if self._index is None:
            return self.document.default_sampler_record()
        return self.document.record("samplers", self._index)

    def _path(self, field: str) -> str:
        if self._index is None:
            return f"<default sampler>.{field}"
        return f"samplers[{self._index}].{field}"

    def mag_filter(self) -> Optional[MagFilter]:
        """Magnification filter, ``None`` when left to the renderer."""
        value = self.as_raw().magFilter
        if value is None:
            return None
        return unwrap_enum(MagFilter, value, self._path("magFilter"))

    def min_filter(self) -> Optional[MinFilter]:
        value = self.as_raw().minFilter
        if value is None:
            return None
        return unwrap_enum(MinFilter, value, self._path("minFilter"))

    def wrap_s(self) -> WrappingMode:
        """Wrapping mode along the horizontal (U) axis."""
        return unwrap_enum(WrappingMode, self.as_raw().wrapS, self._path("wrapS"))

    def wrap_t(self) -> WrappingMode:
        """Wrapping mode along the vertical (V) axis."""
        return unwrap_enum(WrappingMode, self.as_raw().wrapT, self._path("wrapT"))

    def extensions(self) -> SamplerExtensions:
        return SamplerExtensions(self.document, self.as_raw().extensions)

    def _key(self) -> Hashable:
        return (id(self.document), self._index)

    def __repr__(self) -> str:
        return f"Sampler(index={self._index})"


class Texture(EntityView):
    """A texture and its sampler."""

    __slots__ = ("document", "_index")

    def __init__(self, document: "Document", index: int) -> None:
        self.document = document
        self._index = index

    def index(self) -> int:
        """Position in ``textures``."""
        return self._index

    def as_raw(self) -> Any:
        return self.document.record("textures", self._index)

    def sampler(self) -> Sampler:
        """The sampler used by this texture, or the default sampler."""
        index = self.as_raw().sampler
        if index is None:
            return Sampler.default(self.document)
        return self.document.sampler(index)

    def source(self) -> "Image":
        """The image used by this texture."""
        index = unwrap(self.as_raw().source, f"textures[{self._index}].source")
        return self.document.image(index)

    def extensions(self) -> TextureExtensions:
        return TextureExtensions(self.document, self.as_raw().extensions)

    def _key(self) -> Hashable:
        return (id(self.document), self._index)

    def __repr__(self) -> str:
        return f"Texture(index={self._index})"


@runtime_checkable
class TextureLike(Protocol):
    """Operations shared by textures and texture usages."""

    def index(self) -> int: ...

    def sampler(self) -> Sampler: ...

    def source(self) -> "Image": ...


class Info(View):
    """A texture bound at a usage site, such as a material slot.

    The usage record adds the ``TEXCOORD_n`` set and its own extensions and
    extras. ``index``, ``sampler`` and ``source`` forward to the wrapped
    :class:`Texture`; :meth:`texture` exposes it for everything else.
    """

    __slots__ = ("_texture", "_json")

    def __init__(self, texture: Texture, json: Any) -> None:
        self._texture = texture
        self._json = json

    def texture(self) -> Texture:
        """The wrapped texture view."""
        return self._texture

    def as_raw(self) -> Any:
        self._texture.document.as_raw()
        return self._json

    def tex_coord(self) -> int:
        """The set index of the texture's ``TEXCOORD`` attribute."""
        return unwrap(self.as_raw().texCoord, "textureInfo.texCoord")

    def extensions(self) -> InfoExtensions:
        """Extensions of the usage record, not of the texture."""
        texture = Texture(self._texture.document, self._texture.index())
        return InfoExtensions(texture, self.as_raw().extensions)

    # Forwarded texture operations ---------------------------------------------
    def index(self) -> int:
        return self._texture.index()

    def sampler(self) -> Sampler:
        return self._texture.sampler()

    def source(self) -> "Image":
        return self._texture.source()

    if FEATURES.names:

        def name(self) -> Optional[str]:
            return self._texture.name()

    def _key(self) -> Hashable:
        return (self._texture._key(), id(self._json))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(texture={self._texture.index()}, "
            f"tex_coord={self._json.texCoord})"
        )


class NormalTexture(Info):
    __slots__ = ()

    def scale(self) -> float:
        """Scalar multiplier applied to each sampled normal vector."""
        return unwrap(getattr(self.as_raw(), "scale", None), "normalTexture.scale")


class OcclusionTexture(Info):
    __slots__ = ()

    def strength(self) -> float:
        """Scalar multiplier controlling the amount of occlusion applied."""
        return unwrap(
            getattr(self.as_raw(), "strength", None), "occlusionTexture.strength"
        )
