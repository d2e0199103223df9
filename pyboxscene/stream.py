"""
SceneStream: drives a SceneGenerator with two periodic timers and hands
every noisy frame to a publish callable.
"""
import time
from typing import Callable, Optional

from .generator import SceneGenerator
from .logger import get_logger
from .pointcloud import PointCloud

# A tick within this many seconds of its due time runs now
TICK_TOLERANCE = 1e-6


class SceneStream:
    """
    Single-threaded scheduler for the slow (box) and fast (publish) ticks.

    Ticks never overlap. When both are due at the same instant the box tick
    runs first, so a published frame always comes from the latest merge.
    """

    def __init__(
        self,
        generator: SceneGenerator,
        publish: Callable[[PointCloud], None],
        box_period: Optional[float] = None,
        publish_period: Optional[float] = None,
        topic: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        config = generator.config
        self.generator = generator
        self.publish = publish
        self.box_period = box_period if box_period is not None else config.box_period
        self.publish_period = publish_period if publish_period is not None else config.publish_period
        self.topic = topic if topic is not None else config.topic
        self._clock = clock
        self._sleep = sleep
        self.frames_published = 0

    def _next_count(self, start, count, period):
        """
        Index of the next tick after one just ran. When the clock is already
        past that slot, skip ahead to the first slot still in the future
        instead of replaying the missed ones.
        """
        count += 1
        now = self._clock()
        if now + TICK_TOLERANCE >= start + count * period:
            count = int((now - start + TICK_TOLERANCE) // period) + 1
        return count

    def run(self, max_frames: Optional[int] = None, duration: Optional[float] = None) -> int:
        """
        Run the timers until `max_frames` frames were published or
        `duration` seconds elapsed. With neither set, runs until interrupted.

        Returns:
            number of frames published by this call
        """
        logger = get_logger()
        logger.info(
            f"Publishing on {self.topic} every {self.publish_period}s, "
            f"new box every {self.box_period}s"
        )

        start = self._clock()
        box_count = 0
        publish_count = 0
        boxes = 0
        published = 0
        try:
            while True:
                if max_frames is not None and published >= max_frames:
                    break
                now = self._clock()
                if duration is not None and now - start + TICK_TOLERANCE >= duration:
                    break

                if now + TICK_TOLERANCE >= start + box_count * self.box_period:
                    self.generator.box_tick()
                    boxes += 1
                    box_count = self._next_count(start, box_count, self.box_period)

                if now + TICK_TOLERANCE >= start + publish_count * self.publish_period:
                    frame = self.generator.noise_tick()
                    self.publish(frame)
                    publish_count = self._next_count(start, publish_count, self.publish_period)
                    published += 1
                    if max_frames is not None and published >= max_frames:
                        break

                next_due = min(
                    start + box_count * self.box_period,
                    start + publish_count * self.publish_period,
                )
                wait = next_due - self._clock()
                if wait > 0:
                    self._sleep(wait)
        finally:
            self.frames_published += published
            logger.info(f"Stopped after {published} frames and {boxes} boxes")
        return published
