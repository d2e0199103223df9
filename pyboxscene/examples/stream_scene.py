"""
Example: stream synthetic plane + box frames and optionally preview the last one.
"""
import argparse

import open3d as o3d

from pyboxscene.config import SceneConfig
from pyboxscene.generator import SceneGenerator
from pyboxscene.logger import SceneLogger, level_from_name, set_logger
from pyboxscene.stream import SceneStream


def main():
    parser = argparse.ArgumentParser(description="Stream a synthetic plane with a random box")
    parser.add_argument("--config", help="Configuration YAML file")
    parser.add_argument("--frames", type=int, help="Stop after this many frames")
    parser.add_argument("--duration", type=float, help="Stop after this many seconds")
    parser.add_argument("--seed", type=int, help="Seed for poses and noise")
    parser.add_argument("--log_file", help="Also write the log to this file")
    parser.add_argument("--visualize", action="store_true", help="Show the last frame with Open3D")
    args = parser.parse_args()

    config = SceneConfig.from_yaml(args.config) if args.config else SceneConfig()
    if args.seed is not None:
        config.seed = args.seed

    logger = SceneLogger(
        mode='both' if args.log_file else 'console',
        log_file=args.log_file,
        console_level=level_from_name(config.log_level),
    )
    set_logger(logger)

    frames = []

    def publish(frame):
        frames[:] = [frame]
        logger.debug(f"{config.topic}: {len(frame)} points, stamp={frame.stamp:.3f}")

    generator = SceneGenerator(config)
    stream = SceneStream(generator, publish)
    try:
        stream.run(max_frames=args.frames, duration=args.duration)
    except KeyboardInterrupt:
        logger("Interrupted")

    if args.visualize and frames:
        logger(f"Showing last frame: {frames[0]}")
        o3d.visualization.draw_geometries([frames[0].to_open3d()])


if __name__ == "__main__":
    main()
