# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Document root: owns the raw glTF collections all views borrow from."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List

from pygltflib import GLTF2, Material as RawMaterial, Sampler as RawSampler

from .defaults import DEFAULTS, DefaultRegistry
from .errors import (
    E_CORRUPT,
    E_RELEASED,
    CorruptDocumentError,
    DocumentReleasedError,
    index_out_of_range,
)
from .image import Image
from .logging import get_logger
from .material import Material
from .schema import apply_schema_defaults
from .texture import Sampler, Texture
from .validator import run_validation_pipeline, summarize

__all__ = ["Document"]

_log = get_logger("document")


class Document:
    """Read-only root over a parsed :class:`pygltflib.GLTF2`.

    With ``validate=True`` (the default) the validation pipeline runs before
    the document is usable and any error raises
    :class:`CorruptDocumentError`, leaving ``gltf`` untouched. Only once it
    passes are omitted schema defaults filled in on the parsed records.
    Pass ``validate=False`` only for documents whose invariants are already
    known to hold.
    """

    _COLLECTIONS = ("samplers", "textures", "images", "materials")

    def __init__(
        self,
        gltf: GLTF2,
        *,
        validate: bool = True,
        registry: DefaultRegistry = DEFAULTS,
    ) -> None:
        if validate:
            errors = run_validation_pipeline(gltf)
            if errors:
                raise CorruptDocumentError(
                    code=E_CORRUPT,
                    message=f"document failed validation ({len(errors)} errors)",
                    context={
                        "counts": summarize(errors),
                        "errors": [e.to_dict() for e in errors],
                    },
                )
            filled = apply_schema_defaults(gltf)
            _log.debug("schema defaults filled: %d field(s)", filled)
        self._gltf: GLTF2 | None = gltf
        self._default_sampler: RawSampler = registry.sampler()
        self._default_material: RawMaterial = registry.material()
        _log.debug(
            "document ready: samplers=%d textures=%d images=%d materials=%d",
            *(len(getattr(gltf, key) or []) for key in self._COLLECTIONS),
        )

    def __enter__(self) -> "Document":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.release()

    @property
    def released(self) -> bool:
        return self._gltf is None

    def release(self) -> None:
        """Detach the raw document; every view over it becomes unusable."""
        self._gltf = None

    def as_raw(self) -> GLTF2:
        if self._gltf is None:
            raise DocumentReleasedError(
                code=E_RELEASED, message="document has been released"
            )
        return self._gltf

    def record(self, collection: str, index: int) -> Any:
        items: List[Any] = getattr(self.as_raw(), collection) or []
        if not 0 <= index < len(items):
            raise index_out_of_range(collection, index, len(items))
        return items[index]

    def count(self, collection: str) -> int:
        return len(getattr(self.as_raw(), collection) or [])

    def counts(self) -> Dict[str, int]:
        return {key: self.count(key) for key in self._COLLECTIONS}

    # Default records ----------------------------------------------------------
    def default_sampler_record(self) -> RawSampler:
        self.as_raw()
        return self._default_sampler

    def default_material_record(self) -> RawMaterial:
        self.as_raw()
        return self._default_material

    def default_sampler(self) -> Sampler:
        return Sampler.default(self)

    def default_material(self) -> Material:
        return Material.default(self)

    # Lookup -------------------------------------------------------------------
    def sampler(self, index: int) -> Sampler:
        self.record("samplers", index)
        return Sampler(self, index)

    def texture(self, index: int) -> Texture:
        self.record("textures", index)
        return Texture(self, index)

    def image(self, index: int) -> Image:
        self.record("images", index)
        return Image(self, index)

    def material(self, index: int) -> Material:
        self.record("materials", index)
        return Material(self, index)

    def samplers(self) -> Iterator[Sampler]:
        return (Sampler(self, i) for i in range(self.count("samplers")))

    def textures(self) -> Iterator[Texture]:
        return (Texture(self, i) for i in range(self.count("textures")))

    def images(self) -> Iterator[Image]:
        return (Image(self, i) for i in range(self.count("images")))

    def materials(self) -> Iterator[Material]:
        return (Material(self, i) for i in range(self.count("materials")))

    def __repr__(self) -> str:
        if self.released:
            return "Document(released)"
        parts = " ".join(f"{k}={v}" for k, v in self.counts().items())
        return f"Document({parts})"
