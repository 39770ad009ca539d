# -*- coding: utf-8 -*-
"""
conftest.py – OBJ‑тексты, общие для всех тестов.
"""

import pytest


# ----------------------------------------------------------------------
# Основание пирамиды: 4 v, 6 vt, 6 vn, 2 треугольника без общих углов.
# Вторая грань с зеркальными UV → отрицательная «рука» тангента.
# ----------------------------------------------------------------------
SQUARE_BASE_OBJ = """\
# square pyramid base, two triangles
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 1 0
vt 0 1
vt 1 1
vn 0 0 2
vn 1 0 1
vn 0 0 1
vn 0 0 1
vn 0 0 1
vn 0 0 1
f 1/1/1 2/2/2 3/3/3
f 1/4/4 3/5/5 4/6/6
"""

# Ожидаемые тангенты (x, y, z, w) по слотам 0..5
SQUARE_BASE_TANGENTS = [
    (1.0, 0.0, 0.0, 1.0),
    (0.70710678, 0.0, -0.70710678, 1.0),
    (1.0, 0.0, 0.0, 1.0),
    (-1.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.0, -1.0),
]

QUAD_OBJ = """\
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""

# Куб с плоскими нормалями: 6 квадов, 24 уникальных угла
CUBE_OBJ = """\
# unit cube
mtllib cube.mtl
v -1 -1 -1
v  1 -1 -1
v  1  1 -1
v -1  1 -1
v -1 -1  1
v  1 -1  1
v  1  1  1
v -1  1  1
vn 0 0 -1
vn 0 0 1
vn 0 -1 0
vn 0 1 0
vn -1 0 0
vn 1 0 0
s off
f 1//1 4//1 3//1 2//1
f 5//2 6//2 7//2 8//2
f 1//3 2//3 6//3 5//3
f 4//4 8//4 7//4 3//4
f 1//5 5//5 8//5 4//5
f 2//6 3//6 7//6 6//6
"""

GROUPED_OBJ = """\
mtllib scene.mtl
v 0 0 0
v 1 0 0
v 0 1 0
vn 0 0 1
o first
usemtl red
f 1//1 2//1 3//1
usemtl blue
f 3//1 2//1 1//1
g second
s 1
f 1//1 2//1 3//1
"""


@pytest.fixture
def square_base_obj() -> str:
    return SQUARE_BASE_OBJ


@pytest.fixture
def quad_obj() -> str:
    return QUAD_OBJ


@pytest.fixture
def cube_obj() -> str:
    return CUBE_OBJ


@pytest.fixture
def grouped_obj() -> str:
    return GROUPED_OBJ
