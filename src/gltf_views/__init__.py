# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""gltf_views package

Read-only views over a parsed glTF 2.0 document. Views resolve index
references between samplers, textures, images and materials on demand,
substitute a shared default when an optional reference is absent, and
expose extension payloads through per-kind wrappers.

Typical use::

    from gltf_views import load_document

    with load_document("scene.gltf") as doc:
        for texture in doc.textures():
            print(texture.index(), texture.sampler().wrap_s())
"""

from ._version import __version__  # noqa: F401
from .document import Document
from .errors import (
    CorruptDocumentError,
    DocumentError,
    DocumentReleasedError,
    InvariantViolation,
)
from .image import Image, ImageSource
from .loader import load_document, load_gltf
from .material import AlphaMode, Material, PbrMetallicRoughness
from .texture import (
    Info,
    MagFilter,
    MinFilter,
    NormalTexture,
    OcclusionTexture,
    Sampler,
    Texture,
    TextureLike,
    WrappingMode,
)

__all__ = [
    "__version__",
    "Document",
    "load_document",
    "load_gltf",
    "Sampler",
    "Texture",
    "TextureLike",
    "Info",
    "NormalTexture",
    "OcclusionTexture",
    "Image",
    "ImageSource",
    "Material",
    "PbrMetallicRoughness",
    "MagFilter",
    "MinFilter",
    "WrappingMode",
    "AlphaMode",
    "DocumentError",
    "CorruptDocumentError",
    "InvariantViolation",
    "DocumentReleasedError",
]
