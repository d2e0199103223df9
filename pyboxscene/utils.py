"""
Spatial index helpers built on scipy's KDTree.
"""
import numpy as np
from scipy.spatial import KDTree


def as_points(points):
    """
    Coerce a PointCloud, an Open3D PointCloud or an array-like to an (N, 3) array.
    """
    if hasattr(points, 'to_numpy'):  # pyboxscene PointCloud
        points = points.to_numpy()
    elif hasattr(points, 'points'):  # Open3D PointCloud
        points = np.asarray(points.points)
    return np.asarray(points, dtype=np.float64).reshape(-1, 3)


def build_index(points):
    """Build a KD-tree over the given points."""
    return KDTree(as_points(points))


def radius_neighbors(index, queries, radius):
    """
    Indices of indexed points within `radius` (inclusive) of any query point.

    Args:
        index: KDTree from build_index
        queries: (M, 3) query points
        radius: search radius
    Returns:
        sorted array of unique point indices (empty when nothing matches)
    """
    queries = as_points(queries)
    if len(queries) == 0 or index.n == 0:
        return np.empty(0, dtype=np.intp)
    hits = index.query_ball_point(queries, r=radius)
    flat = [i for neighbors in hits for i in neighbors]
    return np.unique(np.asarray(flat, dtype=np.intp))
