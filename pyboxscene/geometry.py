"""
Geometry primitives: BoxPose and planar yaw rotations.
"""
import numpy as np


def yaw_matrix(yaw):
    """2x2 rotation matrix for a counter-clockwise rotation by `yaw` radians."""
    c, s = np.cos(yaw), np.sin(yaw)
    return np.array([[c, -s], [s, c]])


def rotate_about(points_xy, center_xy, yaw):
    """
    Rotate 2D points about a center.

    Args:
        points_xy: (N, 2) array of x, y coordinates
        center_xy: (2,) rotation center
        yaw: rotation angle in radians
    Returns:
        (N, 2) numpy array of rotated points
    """
    pts = np.asarray(points_xy, dtype=np.float64).reshape(-1, 2)
    center = np.asarray(center_xy, dtype=np.float64)
    return (pts - center) @ yaw_matrix(yaw).T + center


class BoxPose:
    def __init__(self, x, y, yaw):
        """
        Pose of the box on the plane.

        Args:
            x: x coordinate of the box corner the box is rotated about
            y: y coordinate of that corner
            yaw: rotation about the vertical axis, radians
        """
        self.x = float(x)
        self.y = float(y)
        self.yaw = float(yaw)

    @classmethod
    def random(cls, rng, xy_range=2.0, yaw_max=3.1415 / 2):
        """Draw x, y from U(-xy_range, xy_range) and yaw from U(0, yaw_max)."""
        x = rng.uniform(-xy_range, xy_range)
        y = rng.uniform(-xy_range, xy_range)
        yaw = rng.uniform(0.0, yaw_max)
        return cls(x, y, yaw)

    @property
    def yaw_degrees(self):
        return np.degrees(self.yaw)

    def as_tuple(self):
        return (self.x, self.y, self.yaw)

    def __repr__(self):
        return f"BoxPose(x={self.x:.3f}, y={self.y:.3f}, yaw={self.yaw:.3f})"
