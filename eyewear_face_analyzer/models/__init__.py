"""
Models package for eyewear face analyzer.
"""
from .landmark_models import (
    FaceShape,
    FramePriority,
    BridgeFit,
    PrescriptionStrength,
    Landmark,
    FaceMeasurements,
    FaceRatios,
    PoseValidation,
    ClassificationResult,
    PrescriptionEye,
    Prescription,
    PrescriptionAnalysis,
    FrameRecommendation,
    RecommendationContext,
    FaceDetectionResult,
    landmarks_from_array,
)

__all__ = [
    'FaceShape',
    'FramePriority',
    'BridgeFit',
    'PrescriptionStrength',
    'Landmark',
    'FaceMeasurements',
    'FaceRatios',
    'PoseValidation',
    'ClassificationResult',
    'PrescriptionEye',
    'Prescription',
    'PrescriptionAnalysis',
    'FrameRecommendation',
    'RecommendationContext',
    'FaceDetectionResult',
    'landmarks_from_array',
]
