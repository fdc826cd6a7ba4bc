# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

import pytest
from pygltflib import Material, PbrMetallicRoughness, TextureInfo

from doc_helper import make_scene, make_single
from gltf_views import CorruptDocumentError, Document
from gltf_views.schema import apply_schema_defaults
from gltf_views.validator import run_validation_pipeline, summarize


def _codes(errors):
    return {e.code for e in errors}


def _paths(errors):
    return {e.path for e in errors}


def test_valid_scene_has_no_errors():
    gltf = make_scene()
    apply_schema_defaults(gltf)
    assert run_validation_pipeline(gltf) == []


def test_dangling_sampler_and_source_references():
    gltf = make_single(sampler=3)
    gltf.textures[0].source = 9
    errs = run_validation_pipeline(gltf)
    assert _codes(errs) == {"E_REF"}
    assert _paths(errs) == {"textures[0].sampler", "textures[0].source"}


def test_missing_source_is_a_field_error():
    gltf = make_single()
    gltf.textures[0].source = None
    errs = run_validation_pipeline(gltf)
    assert "textures[0].source" in _paths(errs)
    assert "E_FIELD" in _codes(errs)


def test_sampler_enumerations_are_closed():
    gltf = make_single(sampler=0)
    gltf.samplers[0].magFilter = 9987  # a min-only filter
    gltf.samplers[0].wrapT = 1
    errs = run_validation_pipeline(gltf)
    assert {e.path for e in errs if e.code == "E_ENUM"} == {
        "samplers[0].magFilter",
        "samplers[0].wrapT",
    }


def test_texture_info_checks():
    gltf = make_scene()
    pbr = gltf.materials[0].pbrMetallicRoughness
    pbr.baseColorTexture = TextureInfo(index=5, texCoord=-1)
    apply_schema_defaults(gltf)
    errs = run_validation_pipeline(gltf)
    path = "materials[0].pbrMetallicRoughness.baseColorTexture"
    assert (("E_RANGE", path + ".texCoord")) in {(e.code, e.path) for e in errs}
    assert (("E_REF", path + ".index")) in {(e.code, e.path) for e in errs}


def test_extension_source_reference_checked():
    gltf = make_scene()
    gltf.textures[2].extensions["KHR_texture_basisu"]["source"] = 40
    apply_schema_defaults(gltf)
    errs = run_validation_pipeline(gltf)
    assert _paths(errs) == {"textures[2].extensions.KHR_texture_basisu.source"}


def test_image_without_data_location():
    gltf = make_single()
    gltf.images[0].uri = None
    errs = run_validation_pipeline(gltf)
    assert ("E_FIELD", "images[0]") in {(e.code, e.path) for e in errs}


def test_collection_type_error_stops_pipeline():
    gltf = make_single()
    gltf.textures = {"0": gltf.textures[0]}
    errs = run_validation_pipeline(gltf)
    assert _codes(errs) == {"E_TYPE"}


def test_document_boundary_raises_corrupt_error():
    gltf = make_single(sampler=4)
    with pytest.raises(CorruptDocumentError) as exc:
        Document(gltf)
    assert exc.value.code == "E_CORRUPT"
    assert exc.value.context["counts"] == {"E_REF": 1}
    assert exc.value.to_dict()["context"]["errors"][0]["path"] == "textures[0].sampler"


def test_summarize_counts_codes():
    gltf = make_single(sampler=4)
    gltf.textures[0].source = 2
    assert summarize(run_validation_pipeline(gltf)) == {"E_REF": 2}


def test_schema_defaults_only_fill_absent_fields():
    gltf = make_scene()
    gltf.samplers[1].wrapT = None
    apply_schema_defaults(gltf)
    assert gltf.samplers[1].wrapS == 33648
    assert gltf.samplers[1].wrapT == 10497
    pbr = gltf.materials[0].pbrMetallicRoughness
    assert pbr.baseColorTexture.texCoord == 2
    assert gltf.materials[0].normalTexture.texCoord == 0
    assert gltf.materials[1].pbrMetallicRoughness is not None


def test_schema_defaulted_fields_may_be_absent_before_defaults():
    gltf = make_scene()
    gltf.samplers[1].wrapT = None
    gltf.materials[0].normalTexture.texCoord = None
    assert run_validation_pipeline(gltf) == []


def test_malformed_extension_source_is_not_a_reference_error():
    gltf = make_scene()
    gltf.textures[2].extensions = {"KHR_texture_basisu": {"source": "abc"}}
    assert run_validation_pipeline(gltf) == []
    doc = Document(gltf)
    assert doc.texture(2).extensions().texture_basisu() is None
    assert doc.texture(2).source() == doc.image(0)


def test_rejected_document_is_left_untouched():
    gltf = make_single(sampler=9)
    gltf.materials = [Material()]
    with pytest.raises(CorruptDocumentError):
        Document(gltf)
    assert gltf.materials[0].alphaCutoff is None
    assert gltf.materials[0].pbrMetallicRoughness is None


def test_accepted_document_gets_schema_defaults():
    gltf = make_single()
    gltf.materials = [Material()]
    doc = Document(gltf)
    assert gltf.materials[0].alphaCutoff == 0.5
    assert doc.material(0).pbr_metallic_roughness().metallic_factor() == 1.0


def test_emissive_factor_arity_checked():
    gltf = make_single()
    gltf.materials = [Material(emissiveFactor=[1.0, 0.0])]
    errs = run_validation_pipeline(gltf)
    assert {(e.code, e.path) for e in errs} == {
        ("E_RANGE", "materials[0].emissiveFactor")
    }
    with pytest.raises(CorruptDocumentError):
        Document(gltf)


def test_base_color_factor_must_be_numbers():
    gltf = make_single(sampler=7)
    gltf.materials = [
        Material(
            pbrMetallicRoughness=PbrMetallicRoughness(
                baseColorFactor=["red", 0.0, 0.0, 1.0], metallicFactor="shiny"
            )
        )
    ]
    errs = run_validation_pipeline(gltf)
    path = "materials[0].pbrMetallicRoughness"
    assert {(e.code, e.path) for e in errs} == {
        ("E_TYPE", path + ".baseColorFactor"),
        ("E_TYPE", path + ".metallicFactor"),
        # per-field type errors do not stop the reference checks
        ("E_REF", "textures[0].sampler"),
    }
