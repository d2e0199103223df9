"""
SpatialMerger: merges a box into the plane and removes the plane points
covered by the box's bottom face.
"""
import numpy as np

from .logger import get_logger
from .pointcloud import PointCloud
from .utils import build_index, radius_neighbors

# Slack on the pass-through bounds, absorbs k * step rounding
Z_SLACK = 1e-9


def split_footprint(box, z_min=0.1, z_max=1.0):
    """
    Split a box cloud by height.

    Points with z_min <= z <= z_max are kept as the box; everything else
    (the bottom layer) is returned as the footprint ring.

    Returns:
        (kept, footprint) pair of PointClouds
    """
    pts = box.to_numpy()
    z = pts[:, 2]
    keep = (z >= z_min - Z_SLACK) & (z <= z_max + Z_SLACK)
    kept = PointCloud.from_numpy(pts[keep], frame_id=box.frame_id, stamp=box.stamp)
    footprint = PointCloud.from_numpy(pts[~keep], frame_id=box.frame_id, stamp=box.stamp)
    return kept, footprint


class SpatialMerger:
    def __init__(self, radius=0.09, z_min=0.1, z_max=1.0):
        """
        Args:
            radius: plane points within this distance of a footprint point are removed
            z_min: lowest box layer kept in the merged cloud
            z_max: highest box layer kept in the merged cloud
        """
        self.radius = radius
        self.z_min = z_min
        self.z_max = z_max
        self.last_removed = 0

    def occluded_indices(self, plane, footprint):
        """Indices of plane points within `radius` of any footprint point."""
        if len(plane) == 0 or len(footprint) == 0:
            return np.empty(0, dtype=np.intp)
        index = build_index(plane)
        return radius_neighbors(index, footprint, self.radius)

    def merge(self, plane, box):
        """
        Merge `box` into `plane`.

        Returns:
            PointCloud with the box walls and top first, followed by the
            plane points that are not covered by the box footprint
        """
        kept, footprint = split_footprint(box, self.z_min, self.z_max)
        removed = self.occluded_indices(plane, footprint)
        trimmed = plane.select(removed, invert=True) if len(removed) else plane

        self.last_removed = len(removed)
        get_logger().debug(
            f"[merge] box={len(kept)} footprint={len(footprint)} "
            f"plane={len(plane)} removed={len(removed)}"
        )

        merged = kept + trimmed
        merged.frame_id = plane.frame_id
        return merged


def merge(plane, box, radius=0.09, z_min=0.1, z_max=1.0):
    """Merge `box` into `plane`; see SpatialMerger.merge."""
    return SpatialMerger(radius=radius, z_min=z_min, z_max=z_max).merge(plane, box)
