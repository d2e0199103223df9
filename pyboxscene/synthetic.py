"""
Synthetic point cloud generators: ground plane, hollow box and noise.
"""
import numpy as np

from .geometry import rotate_about
from .pointcloud import PointCloud, DEFAULT_FRAME_ID


def _grid_count(length, step):
    """Number of samples on [0, length] with spacing `step`, both ends included."""
    return int(round(length / step)) + 1


def generate_plane(extent=5.0, step=0.1, frame_id=DEFAULT_FRAME_ID):
    """
    Generate a flat square grid at z = 0.
    Args:
        extent: half side length, the plane covers [-extent, extent]^2
        step: grid spacing
        frame_id: frame label of the returned cloud
    Returns:
        PointCloud with x as the outer and y as the inner loop
    """
    n = _grid_count(2.0 * extent, step)
    coords = np.linspace(-extent, extent, n)
    xs, ys = np.meshgrid(coords, coords, indexing='ij')
    pts = np.column_stack([xs.ravel(), ys.ravel(), np.zeros(n * n)])
    return PointCloud.from_numpy(pts, frame_id=frame_id)


def generate_box(x, y, yaw, size=1.0, step=0.1, frame_id=DEFAULT_FRAME_ID):
    """
    Generate the surface of a cube standing on z = 0.

    The cube spans [x, x+size] x [y, y+size] x [0, size] before it is
    rotated by `yaw` about the vertical line through (x, y). Only the six
    faces are sampled; interior grid points are skipped.

    Args:
        x, y: corner of the box the rotation is applied about
        yaw: rotation in radians
        size: edge length
        step: grid spacing on the faces
        frame_id: frame label of the returned cloud
    Returns:
        PointCloud ordered by height (outer), local x, local y (inner)
    """
    last = _grid_count(size, step) - 1
    idx = np.arange(last + 1)
    k, a, b = (g.ravel() for g in np.meshgrid(idx, idx, idx, indexing='ij'))

    on_surface = (
        (k == 0) | (k == last) |
        (a == 0) | (a == last) |
        (b == 0) | (b == last)
    )
    k, a, b = k[on_surface], a[on_surface], b[on_surface]

    local = np.column_stack([x + a * step, y + b * step])
    xy = rotate_about(local, (x, y), yaw)
    pts = np.column_stack([xy, k * step])
    return PointCloud.from_numpy(pts, frame_id=frame_id)


def add_noise(cloud, amplitude=0.0002, rng=None):
    """
    Jitter every coordinate with independent uniform noise.
    Args:
        cloud: PointCloud, left untouched
        amplitude: noise is drawn from U(-amplitude, amplitude)
        rng: object with numpy's uniform(low, high, size); defaults to numpy.random
    Returns:
        new PointCloud with the same point count, order and frame label
    """
    if rng is None:
        rng = np.random
    pts = cloud.to_numpy()
    jitter = rng.uniform(-amplitude, amplitude, size=pts.shape)
    return PointCloud.from_numpy(pts + jitter, frame_id=cloud.frame_id)
