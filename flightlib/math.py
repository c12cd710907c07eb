"""Quaternion algebra helpers, sparse insertion and ROS/Unity frame conversion."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from flightlib.types import SCALAR, Quaternion

# Swaps the y and z axes between the right-handed ROS and left-handed Unity frames.
_ROS_TO_UNITY = np.array(
    [[1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, 1.0, 0.0]], dtype=SCALAR
)


@dataclass
class SparseMatrix:
    """Sparse matrix stored as a mapping from (row, col) to value."""

    rows: int
    cols: int
    entries: dict[tuple[int, int], float] = field(default_factory=dict)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @classmethod
    def from_dense(cls, matrix) -> SparseMatrix:
        m = np.atleast_2d(np.asarray(matrix, dtype=SCALAR))
        entries = {
            (int(r), int(c)): float(m[r, c]) for r, c in zip(*np.nonzero(m))
        }
        return cls(m.shape[0], m.shape[1], entries)

    def to_dense(self) -> np.ndarray:
        dense = np.zeros(self.shape, dtype=SCALAR)
        for (r, c), value in self.entries.items():
            dense[r, c] = value
        return dense

    def triplets(self) -> list[tuple[int, int, float]]:
        """Stored entries as (row, col, value), in column-major order."""
        return [
            (r, c, v)
            for (r, c), v in sorted(
                self.entries.items(), key=lambda item: (item[0][1], item[0][0])
            )
        ]


def skew(v) -> np.ndarray:
    x, y, z = np.asarray(v, dtype=SCALAR)
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]], dtype=SCALAR)


def q_left(q: Quaternion) -> np.ndarray:
    """Matrix L(q) with L(q) @ [pw, px, py, pz] equal to q * p."""
    w, x, y, z = q.w, q.x, q.y, q.z
    return np.array(
        [[w, -x, -y, -z], [x, w, -z, y], [y, z, w, -x], [z, -y, x, w]],
        dtype=SCALAR,
    )


def q_right(q: Quaternion) -> np.ndarray:
    """Matrix R(q) with R(q) @ [pw, px, py, pz] equal to p * q."""
    w, x, y, z = q.w, q.x, q.y, q.z
    return np.array(
        [[w, -x, -y, -z], [x, w, z, -y], [y, -z, w, x], [z, y, -x, w]],
        dtype=SCALAR,
    )


def q_from_qe_jacobian(q: Quaternion) -> np.ndarray:
    """Jacobian of (w, x, y, z) with respect to the imaginary part."""
    top = -1.0 / q.w * q.vec()
    return np.vstack([top, np.eye(3, dtype=SCALAR)])


def q_conjugate_jacobian() -> np.ndarray:
    return np.diag(np.array([1.0, -1.0, -1.0, -1.0], dtype=SCALAR))


def qe_rot_jacobian(q: Quaternion, t) -> np.ndarray:
    """Jacobian of R(q) @ t with respect to the imaginary part of q."""
    w, x, y, z = q.w, q.x, q.y, q.z
    tx, ty, tz = np.asarray(t, dtype=SCALAR).reshape(3)
    return 2.0 * np.array(
        [
            [
                (y + z * x / w) * ty + (z - y * x / w) * tz,
                -2.0 * y * tx + (x + z * y / w) * ty + (w - y * y / w) * tz,
                -2.0 * z * tx + (-w + z * z / w) * ty + (x - y * z / w) * tz,
            ],
            [
                (y - z * x / w) * tx + (-2.0 * x) * ty + (-w + x * x / w) * tz,
                (x - z * y / w) * tx + (z + x * y / w) * tz,
                (w - z * z / w) * tx + (-2.0 * z) * ty + (y + x * z / w) * tz,
            ],
            [
                (z + y * x / w) * tx + (w - x * x / w) * ty + (-2.0 * x) * tz,
                (-w + y * y / w) * tx + (z - x * y / w) * ty + (-2.0 * y) * tz,
                (x + y * z / w) * tx + (y - x * z / w) * ty,
            ],
        ],
        dtype=SCALAR,
    )


def qe_inv_rot_jacobian(q: Quaternion, t) -> np.ndarray:
    """Jacobian of R(q).T @ t with respect to the imaginary part of q."""
    w, x, y, z = q.w, q.x, q.y, q.z
    tx, ty, tz = np.asarray(t, dtype=SCALAR).reshape(3)
    return 2.0 * np.array(
        [
            [
                (y - z * x / w) * ty + (z + y * x / w) * tz,
                -2.0 * y * tx + (x - z * y / w) * ty - (w - y * y / w) * tz,
                -2.0 * z * tx + (w - z * z / w) * ty + (x + y * z / w) * tz,
            ],
            [
                (y + z * x / w) * tx - 2.0 * x * ty + (w - x * x / w) * tz,
                (x + z * y / w) * tx + (z - x * y / w) * tz,
                -(w - z * z / w) * tx - 2.0 * z * ty + (y - x * z / w) * tz,
            ],
            [
                (z - y * x / w) * tx - (w - x * x / w) * ty - 2.0 * x * tz,
                (w - y * y / w) * tx + (z + x * y / w) * ty - 2.0 * y * tz,
                (x - y * z / w) * tx + (y + x * z / w) * ty,
            ],
        ],
        dtype=SCALAR,
    )


def _as_sparse(matrix) -> SparseMatrix:
    if isinstance(matrix, SparseMatrix):
        return matrix
    return SparseMatrix.from_dense(matrix)


def matrix_to_triplets(matrix, row_offset=0, col_offset=0):
    """Non-zero entries of a dense or sparse matrix as shifted triplets."""
    return [
        (r + row_offset, c + col_offset, v)
        for r, c, v in _as_sparse(matrix).triplets()
    ]


def insert(source, into, row_offset=0, col_offset=0) -> None:
    """Write ``source`` into ``into`` at the given offset, in place.

    Into a sparse matrix only the non-zero entries of ``source`` are written,
    replacing existing values; into a dense array the whole block is replaced.
    """
    if isinstance(into, SparseMatrix):
        triplets = matrix_to_triplets(source, row_offset, col_offset)
        for r, c, _ in triplets:
            if not (0 <= r < into.rows and 0 <= c < into.cols):
                raise ValueError(
                    f"entry ({r}, {c}) lies outside a {into.rows}x{into.cols} matrix"
                )
        into.entries.update(((r, c), v) for r, c, v in triplets)
        return
    block = (
        source.to_dense()
        if isinstance(source, SparseMatrix)
        else np.atleast_2d(np.asarray(source, dtype=SCALAR))
    )
    rows, cols = block.shape
    if (
        row_offset < 0
        or col_offset < 0
        or row_offset + rows > into.shape[0]
        or col_offset + cols > into.shape[1]
    ):
        raise ValueError("block does not fit into the target matrix")
    into[row_offset : row_offset + rows, col_offset : col_offset + cols] = block


def quaternion_to_euler(quat: Quaternion) -> np.ndarray:
    """Roll, pitch and yaw angles of a quaternion."""
    w, x, y, z = quat.w, quat.x, quat.y, quat.z
    return np.array(
        [
            np.arctan2(2 * w * x + 2 * y * z, w * w - x * x - y * y + z * z),
            -np.arcsin(2 * x * z - 2 * w * y),
            np.arctan2(2 * w * z + 2 * x * y, w * w + x * x - y * y - z * z),
        ],
        dtype=SCALAR,
    )


def transformation_ros_to_unity(matrix) -> list[float]:
    """Convert a 4x4 ROS transformation to a row-major Unity list of 16 values."""
    ros = np.asarray(matrix, dtype=SCALAR)
    if ros.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {ros.shape}")
    tran = np.zeros((4, 4), dtype=SCALAR)
    tran[:3, :3] = _ROS_TO_UNITY
    tran[3, 3] = 1.0
    return [float(v) for v in (tran @ ros @ tran.T).ravel()]


def quaternion_ros_to_unity(quat: Quaternion) -> list[float]:
    """Convert a ROS quaternion to Unity's (x, y, z, w) list."""
    unity_rot = _ROS_TO_UNITY @ quat.to_rotation_matrix() @ _ROS_TO_UNITY.T
    unity = Quaternion.from_rotation_matrix(unity_rot)
    return [unity.x, unity.y, unity.z, unity.w]


def position_ros_to_unity(position) -> list[float]:
    p = np.asarray(position, dtype=SCALAR).reshape(3)
    return [float(p[0]), float(p[2]), float(p[1])]


def scalar_ros_to_unity(scale) -> list[float]:
    s = np.asarray(scale, dtype=SCALAR).reshape(3)
    return [float(s[0]), float(s[2]), float(s[1])]