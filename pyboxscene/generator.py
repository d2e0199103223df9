"""
SceneGenerator: owns the plane and the current merged cloud and implements
the two ticks of the generation loop.
"""
import threading
import time

import numpy as np

from .config import SceneConfig
from .geometry import BoxPose
from .logger import get_logger
from .merge import SpatialMerger
from .pointcloud import PointCloud
from .synthetic import generate_plane, generate_box, add_noise


class SceneGenerator:
    def __init__(self, config=None, rng=None, clock=time.time):
        """
        Build the plane and prepare an empty merged cloud.

        Args:
            config: SceneConfig, defaults are used when None
            rng: numpy Generator for poses and noise; seeded from config.seed when None
            clock: callable returning the stamp of new clouds
        """
        self.config = config if config is not None else SceneConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._clock = clock
        self._lock = threading.Lock()
        get_logger().set_level(self.config.log_level)

        self.merger = SpatialMerger(
            radius=self.config.footprint_radius,
            z_min=self.config.box_step,
            z_max=self.config.box_size,
        )
        self._plane = generate_plane(
            extent=self.config.plane_extent,
            step=self.config.plane_step,
            frame_id=self.config.frame_id,
        )
        self._plane.stamp = self._clock()
        self._merged = PointCloud(frame_id=self.config.frame_id, stamp=self._clock())
        self.last_pose = None
        self.box_ticks = 0

        get_logger().debug(f"[SceneGenerator] plane ready with {len(self._plane)} points")

    @property
    def plane(self):
        return self._plane

    @property
    def merged(self):
        """
        Copy of the most recent merged cloud. The snapshot itself is only
        ever replaced by a box tick, never handed out.
        """
        with self._lock:
            return self._merged.copy()

    def sample_pose(self):
        return BoxPose.random(self.rng, xy_range=self.config.xy_range, yaw_max=self.config.yaw_max)

    def box_tick(self, pose=None):
        """
        Slow tick: place a new box and rebuild the merged cloud.

        Args:
            pose: BoxPose to use; a random one is drawn when None
        Returns:
            a copy of the new merged PointCloud
        """
        if pose is None:
            pose = self.sample_pose()
        get_logger().info(f"Angle given: {pose.yaw_degrees:.4f}")

        box = generate_box(
            pose.x, pose.y, pose.yaw,
            size=self.config.box_size,
            step=self.config.box_step,
            frame_id=self.config.frame_id,
        )
        merged = self.merger.merge(self._plane, box)
        merged.frame_id = self.config.frame_id
        merged.stamp = self._clock()

        with self._lock:
            self._merged = merged
        self.last_pose = pose
        self.box_ticks += 1
        return merged.copy()

    def noise_tick(self):
        """
        Fast tick: a noisy copy of the current merged cloud, ready to publish.
        """
        with self._lock:
            merged = self._merged
        frame = add_noise(merged, amplitude=self.config.noise_amplitude, rng=self.rng)
        frame.frame_id = self.config.frame_id
        frame.stamp = self._clock()
        return frame
