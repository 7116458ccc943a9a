"""
Rigid coordinate-frame transformation.

A transform maps a point p to R p + t, where R is a proper rotation. The
graph only needs the transform to be callable on a point, so any other
callable with the same signature may be used in its place.
"""

import numpy as np

from .vertex import as_point

# Tolerance for accepting a matrix as a proper rotation
ROTATION_TOLERANCE = 1e-6


class pytransformation:
    """
    Rigid transform composed of a rotation matrix and a translation.

    Transforms compose like functions: (T2 * T1)(p) == T2(T1(p)).
    """

    def __init__(self, aRotation=None, aTranslation=None):
        """
        Initialize the transform.

        Args:
            aRotation: 3x3 rotation matrix, identity when omitted
            aTranslation: Translation vector (3 values), zero when omitted

        Raises:
            ValueError: If aRotation is not a proper 3x3 rotation
        """
        if aRotation is None:
            aRotation = np.eye(3)
        aRotation = np.array(aRotation, dtype=np.float64)
        if aRotation.shape != (3, 3):
            raise ValueError(f"Rotation must be 3x3, got shape {aRotation.shape}")
        if not np.allclose(aRotation @ aRotation.T, np.eye(3), atol=ROTATION_TOLERANCE):
            raise ValueError("Rotation matrix is not orthonormal")
        if abs(np.linalg.det(aRotation) - 1.0) > ROTATION_TOLERANCE:
            raise ValueError("Rotation matrix must have determinant +1")

        self.aRotation = aRotation
        self.aTranslation = as_point(aTranslation if aTranslation is not None else (0.0, 0.0, 0.0))

    @classmethod
    def identity(cls) -> "pytransformation":
        return cls()

    @classmethod
    def from_quaternion(cls, w: float, x: float, y: float, z: float,
                        aTranslation=None) -> "pytransformation":
        """
        Build a transform from a (w, x, y, z) quaternion.

        The quaternion is normalized first.

        Raises:
            ValueError: If the quaternion has zero norm
        """
        dNorm = np.sqrt(w * w + x * x + y * y + z * z)
        if dNorm == 0.0:
            raise ValueError("Cannot build a rotation from a zero quaternion")
        w, x, y, z = w / dNorm, x / dNorm, y / dNorm, z / dNorm

        aRotation = np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
        ])
        return cls(aRotation, aTranslation)

    @classmethod
    def from_rotation_vector(cls, aAxis_angle, aTranslation=None) -> "pytransformation":
        """
        Build a transform from an axis-angle vector (Rodrigues formula).

        Args:
            aAxis_angle: Rotation axis scaled by the angle in radians
            aTranslation: Translation vector (3 values)
        """
        aAxis_angle = as_point(aAxis_angle)
        dAngle = np.linalg.norm(aAxis_angle)
        if dAngle < 1e-12:
            return cls(np.eye(3), aTranslation)

        kx, ky, kz = aAxis_angle / dAngle
        aSkew = np.array([
            [0.0, -kz, ky],
            [kz, 0.0, -kx],
            [-ky, kx, 0.0],
        ])
        aRotation = np.eye(3) + np.sin(dAngle) * aSkew + (1.0 - np.cos(dAngle)) * (aSkew @ aSkew)
        return cls(aRotation, aTranslation)

    def __call__(self, point) -> np.ndarray:
        """Transform a single point, returning a new array."""
        return self.aRotation @ as_point(point) + self.aTranslation

    def transform_points(self, aPoint) -> np.ndarray:
        """
        Transform many points at once.

        Args:
            aPoint: Array-like of shape (N, 3)

        Returns:
            New array of shape (N, 3)
        """
        aPoint = np.asarray(aPoint, dtype=np.float64)
        if aPoint.ndim != 2 or aPoint.shape[1] != 3:
            raise ValueError(f"Expected an (N, 3) array, got shape {aPoint.shape}")
        return aPoint @ self.aRotation.T + self.aTranslation

    def __mul__(self, other):
        if not isinstance(other, pytransformation):
            return NotImplemented
        return pytransformation(self.aRotation @ other.aRotation,
                                self.aRotation @ other.aTranslation + self.aTranslation)

    def inverse(self) -> "pytransformation":
        aRotation_inv = self.aRotation.T
        return pytransformation(aRotation_inv, -aRotation_inv @ self.aTranslation)

    def get_matrix(self) -> np.ndarray:
        """Homogeneous 4x4 matrix of the transform."""
        aMatrix = np.eye(4)
        aMatrix[:3, :3] = self.aRotation
        aMatrix[:3, 3] = self.aTranslation
        return aMatrix

    def __repr__(self) -> str:
        return (f"pytransformation(aRotation={self.aRotation.tolist()}, "
                f"aTranslation={self.aTranslation.tolist()})")
