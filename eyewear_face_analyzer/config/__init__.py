"""Configuration constants"""

from .constants import (
    FACE_SHAPE_LANDMARKS,
    FACE_CONTOUR,
    get_face_contour_indices,
    get_measurement_landmarks,
)

__all__ = [
    'FACE_SHAPE_LANDMARKS',
    'FACE_CONTOUR',
    'get_face_contour_indices',
    'get_measurement_landmarks',
]
