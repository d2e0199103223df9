# tests/test_pointcloud.py
"""Tests for the PointCloud container and pose helpers."""

from __future__ import annotations

import numpy as np
import pytest

from pyboxscene.geometry import BoxPose, rotate_about
from pyboxscene.pointcloud import PointCloud

POINTS = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])


def test_from_numpy_round_trip() -> None:
    cloud = PointCloud.from_numpy(POINTS, frame_id="map", stamp=5.0)

    assert len(cloud) == 4
    assert cloud.frame_id == "map"
    assert cloud.stamp == 5.0
    np.testing.assert_array_equal(cloud.to_numpy(), POINTS)


def test_empty_cloud() -> None:
    cloud = PointCloud()

    assert len(cloud) == 0
    assert cloud.to_numpy().shape == (0, 3)
    assert cloud.frame_id == "world"


def test_select_keeps_order() -> None:
    cloud = PointCloud.from_numpy(POINTS)

    np.testing.assert_array_equal(cloud.select([1, 3]).to_numpy(), POINTS[[1, 3]])
    np.testing.assert_array_equal(cloud.select([1, 2], invert=True).to_numpy(), POINTS[[0, 3]])


def test_concatenation_appends_and_keeps_label() -> None:
    left = PointCloud.from_numpy(POINTS[:2], frame_id="world", stamp=1.0)
    right = PointCloud.from_numpy(POINTS[2:], frame_id="other", stamp=2.0)

    joined = left + right

    np.testing.assert_array_equal(joined.to_numpy(), POINTS)
    assert joined.frame_id == "world"
    assert joined.stamp == 1.0


def test_copy_is_independent() -> None:
    cloud = PointCloud.from_numpy(POINTS)
    clone = cloud.copy()

    assert clone.o3d_pcd is not cloud.o3d_pcd
    np.testing.assert_array_equal(clone.to_numpy(), cloud.to_numpy())


def test_rotate_about_quarter_turn() -> None:
    rotated = rotate_about([[2.0, 1.0]], (1.0, 1.0), np.pi / 2)

    np.testing.assert_allclose(rotated, [[1.0, 2.0]], atol=1e-12)


def test_box_pose_random_uses_ranges(rng: np.random.Generator) -> None:
    pose = BoxPose.random(rng, xy_range=0.5, yaw_max=0.25)

    assert -0.5 <= pose.x <= 0.5
    assert -0.5 <= pose.y <= 0.5
    assert 0.0 <= pose.yaw <= 0.25
    assert pose.yaw_degrees == pytest.approx(np.degrees(pose.yaw))
