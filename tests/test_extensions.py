# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

import logging

from pygltflib import TextureInfo

from doc_helper import make_scene
from gltf_views import Document
from gltf_views.extensions import TextureTransform


def test_texture_alternate_source():
    doc = Document(make_scene())
    ext = doc.texture(2).extensions()
    assert "KHR_texture_basisu" in ext
    assert ext.texture_basisu() == doc.image(1)
    assert ext.texture_webp() is None
    assert ext.alternate_source() == doc.image(1)
    assert doc.texture(0).extensions().alternate_source() is None


def test_unknown_extensions_are_preserved_opaquely():
    gltf = make_scene()
    gltf.textures[0].extensions = {"VENDOR_thing": [1, 2, 3]}
    doc = Document(gltf)
    ext = doc.texture(0).extensions()
    assert ext.names() == ["VENDOR_thing"]
    assert ext.get("VENDOR_thing") == [1, 2, 3]
    assert ext.get("missing") is None
    assert len(ext) == 1
    assert list(ext) == ["VENDOR_thing"]


def test_texture_transform_parsed_with_defaults():
    doc = Document(make_scene())
    info = doc.material(0).pbr_metallic_roughness().base_color_texture()
    assert info.extensions().texture_transform() == TextureTransform(
        offset=(0.5, 0.0), rotation=0.0, scale=(2.0, 2.0), tex_coord=None
    )


def test_malformed_extension_reads_as_absent(caplog):
    gltf = make_scene()
    pbr = gltf.materials[0].pbrMetallicRoughness
    pbr.baseColorTexture = TextureInfo(
        index=0,
        texCoord=0,
        extensions={"KHR_texture_transform": {"offset": "left"}},
    )
    gltf.textures[0].extensions = {"EXT_texture_webp": "not-an-object"}
    doc = Document(gltf)
    with caplog.at_level(logging.DEBUG, logger="gltf_views"):
        info = doc.material(0).pbr_metallic_roughness().base_color_texture()
        assert info.extensions().texture_transform() is None
        assert info.tex_coord() == 0
        assert doc.texture(0).extensions().texture_webp() is None
    assert any("KHR_texture_transform" in r.getMessage() for r in caplog.records)


def test_absent_payloads():
    doc = Document(make_scene())
    assert doc.sampler(0).extensions().names() == []
    assert doc.image(0).extensions().get("anything") is None
    assert doc.material(1).extensions().emissive_strength() is None


def test_material_emissive_strength():
    gltf = make_scene()
    gltf.materials[1].extensions = {
        "KHR_materials_emissive_strength": {"emissiveStrength": 4}
    }
    doc = Document(gltf)
    assert doc.material(1).extensions().emissive_strength() == 4.0
    gltf.materials[1].extensions["KHR_materials_emissive_strength"] = {
        "emissiveStrength": True
    }
    assert doc.material(1).extensions().emissive_strength() is None
