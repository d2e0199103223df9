"""
PointCloud class: an Open3D point cloud plus a frame label and a timestamp.
"""
import time

import numpy as np
import open3d as o3d

DEFAULT_FRAME_ID = "world"


class PointCloud:
    def __init__(self, o3d_pcd=None, frame_id=DEFAULT_FRAME_ID, stamp=None):
        """
        Wrap an Open3D PointCloud object.

        Args:
            o3d_pcd: open3d.geometry.PointCloud, or None for an empty cloud
            frame_id: coordinate frame label carried with the cloud
            stamp: generation time in seconds (defaults to now)
        """
        self.o3d_pcd = o3d_pcd if o3d_pcd is not None else o3d.geometry.PointCloud()
        self.frame_id = frame_id
        self.stamp = time.time() if stamp is None else float(stamp)

    @classmethod
    def from_numpy(cls, points, frame_id=DEFAULT_FRAME_ID, stamp=None):
        """Build a cloud from an (N, 3) array-like of xyz coordinates."""
        pts = np.ascontiguousarray(np.asarray(points, dtype=np.float64).reshape(-1, 3))
        pcd = o3d.geometry.PointCloud()
        pcd.points = o3d.utility.Vector3dVector(pts)
        return cls(pcd, frame_id=frame_id, stamp=stamp)

    def to_numpy(self):
        """Return points as Nx3 numpy array."""
        return np.asarray(self.o3d_pcd.points).reshape(-1, 3)

    def to_open3d(self):
        return self.o3d_pcd

    def __len__(self):
        return len(self.o3d_pcd.points)

    def __repr__(self):
        return f"PointCloud(n={len(self)}, frame_id={self.frame_id!r}, stamp={self.stamp:.3f})"

    def select(self, indices, invert=False):
        """
        Return a new cloud with the points at `indices`, or every other
        point when `invert` is True. Surviving points keep their order.
        """
        idx = [int(i) for i in np.asarray(indices, dtype=np.int64).ravel()]
        pcd = self.o3d_pcd.select_by_index(idx, invert=invert)
        return PointCloud(pcd, frame_id=self.frame_id, stamp=self.stamp)

    def copy(self):
        return PointCloud.from_numpy(self.to_numpy().copy(), frame_id=self.frame_id, stamp=self.stamp)

    def __add__(self, other):
        """Concatenate: points of `self` first, then points of `other`."""
        if not isinstance(other, PointCloud):
            return NotImplemented
        pts = np.vstack([self.to_numpy(), other.to_numpy()])
        return PointCloud.from_numpy(pts, frame_id=self.frame_id, stamp=self.stamp)
