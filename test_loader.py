# -*- coding: utf-8 -*-
import json
import logging

import numpy as np
import pytest

from conftest import SQUARE_BASE_TANGENTS
from objmesh import DEFAULT_NAME, LoaderConfig, ObjError, load_obj
from objmesh.errors import DanglingReferenceError, ParseError
from objmesh.mesh import VertexShape
from objmesh.utils.logger import logger
from objmesh.utils.profiler import Profiler


def test_load_square_base_with_tangents(square_base_obj):
    obj = load_obj(square_base_obj, with_tangents=True)
    mesh = obj[DEFAULT_NAME][DEFAULT_NAME]
    assert mesh.vertex_count == 6
    assert mesh.triangle_count == 2
    tangents = [v.tangent for v in mesh.vertices]
    assert np.allclose(tangents, SQUARE_BASE_TANGENTS, atol=1e-4)


def test_tangents_from_config(square_base_obj):
    obj = load_obj(square_base_obj, config=LoaderConfig(with_tangents=True))
    assert obj[DEFAULT_NAME][DEFAULT_NAME].shape is VertexShape.POSITION_NORMAL_TEXTURE_TANGENT


def test_explicit_flag_beats_config(square_base_obj):
    obj = load_obj(square_base_obj, with_tangents=False,
                   config=LoaderConfig(with_tangents=True))
    assert obj[DEFAULT_NAME][DEFAULT_NAME].shape is VertexShape.POSITION_NORMAL_TEXTURE


def test_parse_errors_surface_as_obj_error():
    with pytest.raises(ObjError) as info:
        load_obj("v 0 0 0\nf 1//1 2/2/2 3//3\n")
    assert isinstance(info.value, ParseError)
    assert "line 2" in str(info.value)


def test_assembly_errors_surface_as_obj_error():
    with pytest.raises(ObjError) as info:
        load_obj("v 0 0 0\nvn 0 0 1\nf 1//1 2//1 3//1\n")
    assert isinstance(info.value, DanglingReferenceError)


def test_summary_is_logged(cube_obj, caplog):
    with caplog.at_level(logging.INFO, logger="objmesh"):
        load_obj(cube_obj)
    assert "24 vertices, 12 triangles" in caplog.text


def test_independent_loads_do_not_share_state(cube_obj, grouped_obj):
    first = load_obj(cube_obj)
    load_obj(grouped_obj)
    again = load_obj(cube_obj)
    assert list(first.meshes()) == list(again.meshes())


# ----------------------------------------------------------------------
# Буферы для GPU
# ----------------------------------------------------------------------
def test_to_arrays(quad_obj):
    mesh = load_obj(quad_obj, with_tangents=True)[DEFAULT_NAME][DEFAULT_NAME]
    verts, inds = mesh.to_arrays()
    assert verts.dtype == np.float32 and verts.shape == (4, 12)
    assert inds.dtype == np.uint32 and inds.shape == (2, 3)
    assert verts[1, 0:3].tolist() == [1.0, 0.0, 0.0]      # position
    assert verts[1, 3:6].tolist() == [0.0, 0.0, 1.0]      # normal
    assert verts[1, 6:8].tolist() == [1.0, 0.0]           # texcoord
    assert verts[1, 8:12].tolist() == [1.0, 0.0, 0.0, 1.0]  # tangent
    assert inds.tolist() == [[0, 1, 2], [3, 0, 2]]


def test_interleaved(cube_obj):
    mesh = load_obj(cube_obj)[DEFAULT_NAME][DEFAULT_NAME]
    verts, inds = mesh.interleaved()
    assert verts.shape == (24 * VertexShape.POSITION_NORMAL.stride,)
    assert inds.shape == (mesh.index_count,) == (36,)
    assert int(inds.max()) < mesh.vertex_count


def test_bounding_sphere(quad_obj):
    mesh = load_obj(quad_obj)[DEFAULT_NAME][DEFAULT_NAME]
    centre, radius = mesh.bounding_sphere
    assert np.allclose(centre, [0.5, 0.5, 0.0])
    assert radius == pytest.approx(np.sqrt(0.5))


# ----------------------------------------------------------------------
# Настройки
# ----------------------------------------------------------------------
def test_config_defaults():
    cfg = LoaderConfig()
    assert cfg.with_tangents is False
    assert cfg.skip_degenerate_uv is False
    assert cfg["log_level"] is None
    assert cfg.get("missing", 42) == 42


def test_config_from_file(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"with_tangents": True}), encoding="utf-8")
    cfg = LoaderConfig(path)
    assert cfg.with_tangents is True
    assert cfg.skip_degenerate_uv is False


def test_config_flags_must_be_booleans(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"with_tangents": "false"}), encoding="utf-8")
    with pytest.raises(ValueError):
        LoaderConfig(path).with_tangents
    with pytest.raises(ValueError):
        LoaderConfig(skip_degenerate_uv="yes").skip_degenerate_uv
    with pytest.raises(ValueError):
        LoaderConfig(with_tangents=1).with_tangents


def test_load_rejects_non_boolean_config(square_base_obj):
    with pytest.raises(ValueError):
        load_obj(square_base_obj, config=LoaderConfig(with_tangents="false"))


def test_config_missing_file_uses_defaults(tmp_path):
    cfg = LoaderConfig(tmp_path / "absent.json")
    assert cfg.with_tangents is False
    assert not (tmp_path / "absent.json").exists()


def test_config_broken_file_uses_defaults(tmp_path, caplog):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="objmesh"):
        cfg = LoaderConfig(path)
    assert cfg.with_tangents is False
    assert "Failed to read config" in caplog.text


def test_config_save_roundtrip(tmp_path):
    path = tmp_path / "saved.json"
    cfg = LoaderConfig(with_tangents=True)
    cfg.save(path)
    assert LoaderConfig(path).with_tangents is True


def test_config_save_without_path():
    with pytest.raises(ValueError):
        LoaderConfig().save()


def test_config_log_level():
    previous = logger.level
    try:
        cfg = LoaderConfig(log_level="debug")
        assert logger.level == logging.DEBUG
        cfg["log_level"] = "WARNING"
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(previous)


def test_profiler_measures(caplog):
    with caplog.at_level(logging.DEBUG, logger="objmesh"):
        with Profiler("block") as p:
            sum(range(100))
    assert p.elapsed_ms >= 0.0
    assert "[Profiler] block" in caplog.text
