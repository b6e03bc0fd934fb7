"""입력 검증 유틸리티 함수"""

import math
from typing import Any, Optional, Sequence

from ..config.constants import CANONICAL_LANDMARK_COUNT, FACE_SHAPE_LANDMARKS
from .exceptions import InvalidLandmarkError, InvalidPrescriptionError, LandmarkCountError


def validate_landmarks(landmarks: Sequence[Any], min_count: int = CANONICAL_LANDMARK_COUNT) -> None:
    """
    랜드마크 시퀀스 유효성 검증

    Args:
        landmarks: 얼굴 landmarks (x, y, z 속성)
        min_count: 최소 랜드마크 개수

    Raises:
        LandmarkCountError: 개수가 부족한 경우 (IndexError)
        InvalidLandmarkError: 측정용 포인트에 좌표가 없거나 유한한 값이 아닌 경우
    """
    if landmarks is None:
        raise InvalidLandmarkError("Landmarks are None")

    if len(landmarks) < min_count:
        raise LandmarkCountError(min_count, len(landmarks))

    for name, index in FACE_SHAPE_LANDMARKS.items():
        point = landmarks[index]
        if not all(hasattr(point, axis) for axis in ('x', 'y', 'z')):
            raise InvalidLandmarkError(
                f"Landmark {index} ({name}) must have x, y, z attributes, got {type(point).__name__}"
            )

        # NaN/inf 좌표는 mm 정수 변환에서 실패하므로 미리 거부
        if not all(math.isfinite(getattr(point, axis)) for axis in ('x', 'y', 'z')):
            raise InvalidLandmarkError(
                f"Landmark {index} ({name}) has non-finite coordinates: "
                f"({point.x}, {point.y}, {point.z})"
            )


def validate_prescription(prescription: Optional[Any]) -> None:
    """
    처방 값 검증 (축은 0 ~ 180, 빈 값과 NaN은 미입력으로 간주)

    Raises:
        InvalidPrescriptionError: 축 범위를 벗어난 경우
    """
    if prescription is None:
        return

    for side, eye in (('rightEye', prescription.right_eye), ('leftEye', prescription.left_eye)):
        if eye.axis is None or math.isnan(eye.axis):
            continue
        if not 0 <= eye.axis <= 180:
            raise InvalidPrescriptionError(f"{side} axis must be between 0 and 180, got {eye.axis}")
