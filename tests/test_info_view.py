# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

from doc_helper import make_scene
from gltf_views import Document, Info, NormalTexture, OcclusionTexture, TextureLike


def _base_color(doc: Document) -> Info:
    info = doc.material(0).pbr_metallic_roughness().base_color_texture()
    assert info is not None
    return info


def test_tex_coord_returns_stored_value():
    doc = Document(make_scene())
    info = _base_color(doc)
    assert info.tex_coord() == 2
    assert info.source().index() == doc.texture(0).source().index()


def test_tex_coord_normalised_upstream_when_omitted():
    gltf = make_scene()
    doc = Document(gltf)
    normal = doc.material(0).normal_texture()
    assert normal.tex_coord() == 0


def test_info_view_wraps_caller_supplied_texture():
    gltf = make_scene()
    doc = Document(gltf)
    texture = doc.texture(0)
    info = Info(texture, gltf.materials[0].pbrMetallicRoughness.baseColorTexture)
    assert info.texture() is texture
    assert info.tex_coord() == 2


def test_delegated_operations_match_texture_view():
    doc = Document(make_scene())
    info = _base_color(doc)
    texture = info.texture()
    assert info.index() == texture.index()
    assert info.sampler() == texture.sampler()
    assert info.source() == texture.source()
    assert info.texture().extensions().names() == doc.texture(0).extensions().names()
    assert info.texture().extras() is doc.texture(0).extras()
    if hasattr(texture, "name"):
        assert info.name() == texture.name()


def test_delegation_through_default_sampler():
    doc = Document(make_scene())
    normal = doc.material(0).normal_texture()
    assert normal.index() == 1
    assert normal.sampler().index() is None
    assert normal.sampler() == doc.texture(1).sampler()


def test_info_is_usable_wherever_a_texture_is():
    doc = Document(make_scene())

    def describe(tex: TextureLike):
        return (tex.index(), tex.sampler().index(), tex.source().index())

    info = _base_color(doc)
    assert isinstance(info, TextureLike)
    assert isinstance(doc.texture(0), TextureLike)
    assert describe(info) == describe(doc.texture(0))


def test_usage_extras_and_extensions_are_separate_from_texture():
    gltf = make_scene()
    doc = Document(gltf)
    info = _base_color(doc)
    usage = gltf.materials[0].pbrMetallicRoughness.baseColorTexture
    assert info.extras() is usage.extras
    assert info.extras() == {"slot": "albedo"}
    assert info.extensions().names() == ["KHR_texture_transform"]
    assert "KHR_texture_transform" not in info.texture().extensions()


def test_usage_extensions_carry_a_copy_of_the_texture_view():
    doc = Document(make_scene())
    info = _base_color(doc)
    ext = info.extensions()
    assert ext.texture() == info.texture()
    assert ext.texture() is not info.texture()


def test_normal_and_occlusion_extra_fields():
    doc = Document(make_scene())
    material = doc.material(0)
    normal = material.normal_texture()
    occlusion = material.occlusion_texture()
    assert isinstance(normal, NormalTexture)
    assert isinstance(occlusion, OcclusionTexture)
    assert normal.scale() == 0.5
    assert occlusion.strength() == 1.0
    assert occlusion.tex_coord() == 1
    assert occlusion.index() == 2
