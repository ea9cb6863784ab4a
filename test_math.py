# -*- coding: utf-8 -*-
import numpy as np
from simple_math.vector.vector3f import Vector3f
from simple_math.matrix.matrix3f import Matrix3f

def test_vector3f_ops():
    a = Vector3f(1, 2, 3)
    b = Vector3f(4, -1, 0)
    assert a.copy().add(b).as_np().tolist() == [5, 1, 3]
    assert a.copy().sub(b).as_np().tolist() == [-3, 3, 3]
    assert a.copy().scale(2).as_np().tolist() == [2, 4, 6]
    assert a.dot(b) == 2.0

def test_vector3f_cross():
    assert Vector3f.unit_x().cross(Vector3f.unit_y()) == Vector3f.unit_z()

def test_matrix3f_identity():
    I = Matrix3f.identity()
    assert np.allclose(I.to_np(), np.eye(3, dtype=np.float32))

def test_matrix3f_scale():
    S = Matrix3f.create_scale_mat(Vector3f(2, 3, 4))
    p = np.array([1, 1, 1], dtype=np.float32)
    assert np.allclose(S.to_np() @ p, np.array([2, 3, 4], dtype=np.float32))
