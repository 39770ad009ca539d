# -*- coding: utf-8 -*-
import numpy as np
from objmesh.math.vec3 import Vec3


def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (2 * a).as_np().tolist() == [2, 4, 6]
    assert (-a).as_np().tolist() == [-1, -2, -3]
    assert (a / 2).as_np().tolist() == [0.5, 1.0, 1.5]


def test_vec3_dot_cross():
    x = Vec3(1, 0, 0)
    y = Vec3(0, 1, 0)
    assert x.dot(y) == 0.0
    assert x.cross(y).to_tuple() == (0.0, 0.0, 1.0)
    assert y.cross(x).to_tuple() == (0.0, 0.0, -1.0)


def test_vec3_normalized():
    v = Vec3(3, 0, 4).normalized()
    assert np.allclose(v.as_np(), [0.6, 0.0, 0.8])
    assert abs(v.length() - 1.0) < 1e-12


def test_vec3_zero_stays_zero():
    assert Vec3().normalized().to_tuple() == (0.0, 0.0, 0.0)
