import numpy as np
import pytest

from flightlib.math import (
    SparseMatrix,
    insert,
    matrix_to_triplets,
    position_ros_to_unity,
    q_conjugate_jacobian,
    q_from_qe_jacobian,
    q_left,
    q_right,
    qe_inv_rot_jacobian,
    qe_rot_jacobian,
    quaternion_ros_to_unity,
    quaternion_to_euler,
    scalar_ros_to_unity,
    skew,
    transformation_ros_to_unity,
)
from flightlib.types import Quaternion

SWAP = np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, 1.0, 0.0]])


def _wxyz(q):
    return np.array([q.w, q.x, q.y, q.z])


def _q_from_qe(qe):
    return Quaternion(np.sqrt(1.0 - np.dot(qe, qe)), *qe)


def _numeric_jacobian(func, qe, eps=1e-6):
    columns = []
    for direction in np.eye(3):
        columns.append((func(qe + eps * direction) - func(qe - eps * direction)) / (2 * eps))
    return np.column_stack(columns)


def test_skew_matches_cross_product():
    v = np.array([1.0, 2.0, 3.0])
    w = np.array([-0.5, 4.0, 0.25])
    assert np.allclose(skew(v) @ w, np.cross(v, w))
    assert np.allclose(skew(v), -skew(v).T)


def test_q_left_and_right_match_products():
    q = Quaternion(0.3, -0.2, 0.5, 0.1)
    p = Quaternion(-0.4, 0.7, 0.2, -0.6)
    assert np.allclose(q_left(q) @ _wxyz(p), _wxyz(q * p))
    assert np.allclose(q_right(q) @ _wxyz(p), _wxyz(p * q))


def test_q_conjugate_jacobian_conjugates():
    q = Quaternion(0.3, -0.2, 0.5, 0.1)
    assert np.allclose(q_conjugate_jacobian() @ _wxyz(q), _wxyz(q.conjugate()))


def test_q_from_qe_jacobian_numeric():
    qe = np.array([0.1, -0.2, 0.3])
    q = _q_from_qe(qe)
    numeric = _numeric_jacobian(lambda e: _wxyz(_q_from_qe(e)), qe)
    assert np.allclose(q_from_qe_jacobian(q), numeric, atol=1e-6)


def test_qe_rot_jacobian_numeric():
    qe = np.array([0.2, 0.1, -0.3])
    t = np.array([1.0, -2.0, 0.5])
    numeric = _numeric_jacobian(lambda e: _q_from_qe(e).to_rotation_matrix() @ t, qe)
    assert np.allclose(qe_rot_jacobian(_q_from_qe(qe), t), numeric, atol=1e-5)


def test_qe_inv_rot_jacobian_numeric():
    qe = np.array([-0.1, 0.25, 0.15])
    t = np.array([0.3, 1.5, -1.0])
    numeric = _numeric_jacobian(lambda e: _q_from_qe(e).to_rotation_matrix().T @ t, qe)
    assert np.allclose(qe_inv_rot_jacobian(_q_from_qe(qe), t), numeric, atol=1e-5)


def test_sparse_dense_round_trip_and_triplet_order():
    dense = np.array([[0.0, 2.0], [3.0, 0.0], [0.0, 5.0]])
    sparse = SparseMatrix.from_dense(dense)
    assert np.array_equal(sparse.to_dense(), dense)
    assert sparse.triplets() == [(1, 0, 3.0), (0, 1, 2.0), (2, 1, 5.0)]


def test_matrix_to_triplets_applies_offsets():
    dense = np.array([[1.0, 0.0], [0.0, 4.0]])
    assert matrix_to_triplets(dense, 2, 3) == [(2, 3, 1.0), (3, 4, 4.0)]
    assert matrix_to_triplets(SparseMatrix.from_dense(dense)) == [(0, 0, 1.0), (1, 1, 4.0)]


def test_insert_into_sparse_overwrites_only_nonzeros():
    into = SparseMatrix.from_dense(np.ones((3, 3)))
    insert(np.array([[7.0, 0.0]]), into, 1, 1)
    result = into.to_dense()
    assert result[1, 1] == 7.0
    assert result[1, 2] == 1.0
    assert result.sum() == 8.0 + 7.0


def test_insert_into_sparse_out_of_range():
    into = SparseMatrix(2, 2)
    with pytest.raises(ValueError):
        insert(np.ones((2, 2)), into, 1, 1)


def test_insert_into_dense_replaces_block():
    into = np.ones((3, 3))
    block = np.array([[0.0, 9.0], [8.0, 0.0]])
    insert(block, into, 1, 1)
    assert np.array_equal(into[1:, 1:], block)
    assert into[0, 0] == 1.0
    with pytest.raises(ValueError):
        insert(block, into, 2, 2)


def test_quaternion_to_euler_single_axis():
    angle = 0.7
    yaw = Quaternion(np.cos(angle / 2), 0.0, 0.0, np.sin(angle / 2))
    roll = Quaternion(np.cos(angle / 2), np.sin(angle / 2), 0.0, 0.0)
    assert np.allclose(quaternion_to_euler(yaw), [0.0, 0.0, angle])
    assert np.allclose(quaternion_to_euler(roll), [angle, 0.0, 0.0])
    assert np.allclose(quaternion_to_euler(Quaternion.identity()), 0.0)


def test_position_and_scale_swap_axes():
    assert position_ros_to_unity([1.0, 2.0, 3.0]) == [1.0, 3.0, 2.0]
    assert scalar_ros_to_unity([4.0, 5.0, 6.0]) == [4.0, 6.0, 5.0]


def test_transformation_ros_to_unity():
    m = np.eye(4)
    m[:3, 3] = [1.0, 2.0, 3.0]
    unity = transformation_ros_to_unity(m)
    assert len(unity) == 16
    assert unity[3] == 1.0 and unity[7] == 3.0 and unity[11] == 2.0
    assert transformation_ros_to_unity(np.eye(4)) == list(np.eye(4).ravel())
    with pytest.raises(ValueError):
        transformation_ros_to_unity(np.eye(3))


def test_quaternion_ros_to_unity():
    assert quaternion_ros_to_unity(Quaternion.identity()) == [0.0, 0.0, 0.0, 1.0]
    q = Quaternion(0.3, -0.2, 0.5, 0.1).normalized()
    x, y, z, w = quaternion_ros_to_unity(q)
    expected = SWAP @ q.to_rotation_matrix() @ SWAP.T
    assert np.allclose(Quaternion(w, x, y, z).to_rotation_matrix(), expected)