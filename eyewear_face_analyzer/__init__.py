"""
Eyewear Face Analyzer
MediaPipe FaceMesh 랜드마크 기반 얼굴형 분석 및 안경테 추천
"""

__version__ = "0.1.0"

from .models.landmark_models import (
    FaceShape,
    Landmark,
    FaceMeasurements,
    FaceRatios,
    FrameRecommendation,
    Prescription,
    PrescriptionEye,
    RecommendationContext,
    FaceDetectionResult,
)
from .processing.face_analyzer import FaceAnalyzer, process_face_detection
from .processing.face_shape_classifier import classify_face_shape
from .processing.measurement_extractor import extract_measurements
from .processing.pose_validator import validate_face_pose
from .recommendation.frame_logic import (
    calculate_frame_size,
    get_enhanced_recommendations,
    get_frame_suggestions,
)

__all__ = [
    'FaceShape',
    'Landmark',
    'FaceMeasurements',
    'FaceRatios',
    'FrameRecommendation',
    'Prescription',
    'PrescriptionEye',
    'RecommendationContext',
    'FaceDetectionResult',
    'FaceAnalyzer',
    'process_face_detection',
    'classify_face_shape',
    'extract_measurements',
    'validate_face_pose',
    'calculate_frame_size',
    'get_enhanced_recommendations',
    'get_frame_suggestions',
]
