# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Image views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Hashable, Optional

from .errors import missing_field
from .extensions import ImageExtensions
from .views import EntityView

if TYPE_CHECKING:  # pragma: no cover
    from .document import Document

__all__ = ["Image", "ImageSource"]


@dataclass(frozen=True, slots=True)
class ImageSource:
    """Where the image data lives; exactly one of uri/buffer_view is set.

    Decoding either form is left to the caller.
    """

    uri: Optional[str] = None
    buffer_view: Optional[int] = None
    mime_type: Optional[str] = None

    @property
    def is_data_uri(self) -> bool:
        return self.uri is not None and self.uri.startswith("data:")


class Image(EntityView):
    """Image data referenced by a texture."""

    __slots__ = ("document", "_index")

    def __init__(self, document: "Document", index: int) -> None:
        self.document = document
        self._index = index

    def index(self) -> int:
        return self._index

    def as_raw(self) -> Any:
        return self.document.record("images", self._index)

    def source(self) -> ImageSource:
        """Where the data lives; a bufferView wins over a uri."""
        raw = self.as_raw()
        if raw.bufferView is not None:
            return ImageSource(buffer_view=raw.bufferView, mime_type=raw.mimeType)
        if raw.uri is None:
            raise missing_field(f"images[{self._index}].uri")
        return ImageSource(uri=raw.uri, mime_type=raw.mimeType)

    def extensions(self) -> ImageExtensions:
        return ImageExtensions(self.document, self.as_raw().extensions)

    def _key(self) -> Hashable:
        return (id(self.document), self._index)

    def __repr__(self) -> str:
        return f"Image(index={self._index})"
