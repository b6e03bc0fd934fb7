"""Processing layer components"""

from .geometry import GeometryCalculator
from .pose_validator import PoseValidator
from .measurement_extractor import MeasurementExtractor
from .face_shape_classifier import FaceShapeClassifier
from .face_analyzer import FaceAnalyzer

__all__ = [
    'GeometryCalculator',
    'PoseValidator',
    'MeasurementExtractor',
    'FaceShapeClassifier',
    'FaceAnalyzer',
]
