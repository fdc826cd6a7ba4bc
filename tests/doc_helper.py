# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""In-memory glTF documents shared by the tests."""

from __future__ import annotations

from pygltflib import (
    GLTF2,
    Buffer,
    BufferView,
    Image,
    Material,
    NormalMaterialTexture,
    OcclusionTextureInfo,
    PbrMetallicRoughness,
    Sampler,
    Texture,
    TextureInfo,
)

NEAREST = 9728
LINEAR = 9729
LINEAR_MIPMAP_LINEAR = 9987
REPEAT = 10497
CLAMP_TO_EDGE = 33071
MIRRORED_REPEAT = 33648


def make_scene() -> GLTF2:
    """Two samplers, three textures (one without sampler), two images."""
    return GLTF2(
        samplers=[
            Sampler(
                magFilter=NEAREST,
                minFilter=LINEAR,
                wrapS=REPEAT,
                wrapT=CLAMP_TO_EDGE,
            ),
            Sampler(wrapS=MIRRORED_REPEAT, wrapT=MIRRORED_REPEAT),
        ],
        textures=[
            Texture(sampler=0, source=0),
            Texture(source=1),
            Texture(
                sampler=1,
                source=0,
                extensions={"KHR_texture_basisu": {"source": 1}},
                extras={"origin": "baked"},
            ),
        ],
        images=[
            Image(uri="albedo.png", mimeType="image/png"),
            Image(bufferView=0, mimeType="image/ktx2"),
        ],
        buffers=[Buffer(byteLength=16)],
        bufferViews=[BufferView(buffer=0, byteLength=16)],
        materials=[
            Material(
                pbrMetallicRoughness=PbrMetallicRoughness(
                    baseColorTexture=TextureInfo(
                        index=0,
                        texCoord=2,
                        extensions={
                            "KHR_texture_transform": {
                                "offset": [0.5, 0.0],
                                "scale": [2, 2],
                            }
                        },
                        extras={"slot": "albedo"},
                    ),
                ),
                normalTexture=NormalMaterialTexture(index=1, scale=0.5),
                occlusionTexture=OcclusionTextureInfo(index=2, texCoord=1),
            ),
            Material(),
        ],
    )


def make_single(sampler=None) -> GLTF2:
    """One texture whose sampler reference is given (or absent)."""
    samplers = [
        Sampler(magFilter=NEAREST, minFilter=LINEAR, wrapS=REPEAT, wrapT=CLAMP_TO_EDGE)
    ]
    return GLTF2(
        samplers=samplers,
        textures=[Texture(sampler=sampler, source=0)],
        images=[Image(uri="a.png")],
    )
