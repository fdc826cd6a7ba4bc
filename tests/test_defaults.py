# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from doc_helper import CLAMP_TO_EDGE, make_scene, make_single
from gltf_views import AlphaMode, Document, WrappingMode
from gltf_views.defaults import DEFAULTS, DefaultRegistry


def test_registry_creates_each_default_once():
    registry = DefaultRegistry()
    assert registry.sampler() is registry.sampler()
    assert registry.material() is registry.material()
    assert registry.kinds() == ("sampler", "material")


def test_registry_race_yields_single_instance():
    registry = DefaultRegistry()
    barrier = threading.Barrier(8)

    def grab(_):
        barrier.wait()
        return registry.sampler()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(grab, range(8)))
    assert all(r is results[0] for r in results)


def test_default_sampler_values_are_format_defaults():
    raw = DefaultRegistry().sampler()
    assert raw.magFilter is None
    assert raw.minFilter is None
    assert raw.wrapS == WrappingMode.REPEAT
    assert raw.wrapT == WrappingMode.REPEAT


def test_documents_share_the_process_default():
    a = Document(make_single())
    b = Document(make_scene())
    assert a.default_sampler().as_raw() is DEFAULTS.sampler()
    assert b.default_sampler().as_raw() is DEFAULTS.sampler()


def test_document_may_use_its_own_registry():
    registry = DefaultRegistry()
    doc = Document(make_single(), registry=registry)
    assert doc.texture(0).sampler().as_raw() is registry.sampler()
    assert doc.texture(0).sampler().as_raw() is not DEFAULTS.sampler()


def test_default_material():
    doc = Document(make_single())
    material = doc.default_material()
    assert material.index() is None
    assert material.alpha_mode() == AlphaMode.OPAQUE
    assert material.alpha_cutoff() == 0.5
    assert material.double_sided() is False
    assert material.pbr_metallic_roughness().base_color_factor() == (1.0, 1.0, 1.0, 1.0)
    assert material.normal_texture() is None


def test_default_records_are_read_only():
    registry = DefaultRegistry()
    a = Document(make_single(), registry=registry)
    raw = a.default_sampler().as_raw()
    with pytest.raises(AttributeError):
        raw.wrapS = CLAMP_TO_EDGE
    with pytest.raises(TypeError):
        a.default_sampler().extras()["tag"] = 1
    material = a.default_material().as_raw()
    with pytest.raises(AttributeError):
        material.pbrMetallicRoughness.metallicFactor = 0.0
    with pytest.raises(AttributeError):
        material.alphaMode = "BLEND"

    b = Document(make_scene(), registry=registry)
    assert b.default_sampler().as_raw() is raw
    assert b.default_sampler().wrap_s() == WrappingMode.REPEAT
    assert b.default_sampler().extras() == {}
    assert b.default_material().emissive_factor() == (0.0, 0.0, 0.0)
    assert b.default_material().pbr_metallic_roughness().metallic_factor() == 1.0
