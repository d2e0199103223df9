"""
pyboxscene: synthetic ground plane + box point cloud streams
"""

# Make core modules available at package level
from .pointcloud import PointCloud
from .geometry import BoxPose
from .synthetic import generate_plane, generate_box, add_noise
from .merge import SpatialMerger, merge, split_footprint
from .generator import SceneGenerator
from .stream import SceneStream
from .config import SceneConfig
from .logger import SceneLogger, LogLevel, get_logger, set_logger

__all__ = [
    'PointCloud',
    'BoxPose',
    'generate_plane',
    'generate_box',
    'add_noise',
    'SpatialMerger',
    'merge',
    'split_footprint',
    'SceneGenerator',
    'SceneStream',
    'SceneConfig',
    'SceneLogger',
    'LogLevel',
    'get_logger',
    'set_logger'
]
