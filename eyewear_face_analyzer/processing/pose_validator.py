"""얼굴 자세 품질 검증 (정면 촬영 여부)"""

import math
from typing import Any, Sequence

from ..config.constants import FACE_SHAPE_LANDMARKS as L
from ..models.landmark_models import PoseValidation
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

ROTATION_WARNING = 'Face appears rotated. Please face the camera directly.'
SLIGHT_ROTATION_WARNING = 'Slight face rotation detected. Center your face for best results.'
TILT_WARNING = 'Face is tilted. Keep your head level.'
TOO_FAR_WARNING = 'Move closer to the camera.'
TOO_CLOSE_WARNING = 'Move back slightly from the camera.'
DEPTH_ASYMMETRY_WARNING = 'Face depth asymmetry detected. Ensure even lighting and frontal pose.'

# 코끝이 이마~턱 사이 55% 지점에 있으면 수평 자세
EXPECTED_NOSE_HEIGHT_RATIO = 0.55


def _normalized_deviation(offset: float, span: float) -> float:
    """offset / span, span이 0이면 offset 유무에 따라 inf 또는 0"""
    if span == 0:
        return math.inf if offset > 0 else 0.0
    return offset / span


class PoseValidator:
    """
    자세 품질 검증기

    점수는 100에서 시작하여 검사 항목마다 감점:
    - 좌우 회전 (30 / 15)
    - 상하 기울기 (25 / 10, 약한 기울기는 경고 없이 감점만)
    - 카메라 거리 (20 / 15)
    - 깊이 비대칭 (20)
    """

    def validate(self, landmarks: Sequence[Any]) -> PoseValidation:
        """
        자세 검증 수행

        Args:
            landmarks: 468개 얼굴 landmarks

        Returns:
            PoseValidation: 점수(0~100) 및 경고 목록
        """
        warnings = []
        score = 100

        # 1. 좌우 회전: 코끝이 양 눈 바깥쪽 중점에서 벗어난 정도
        left_eye_x = landmarks[L['left_eye_outer']].x
        right_eye_x = landmarks[L['right_eye_outer']].x
        nose_x = landmarks[L['nose_tip']].x
        expected_nose_x = (left_eye_x + right_eye_x) / 2
        eye_span = abs(right_eye_x - left_eye_x)
        horizontal_deviation = _normalized_deviation(abs(nose_x - expected_nose_x), eye_span)

        if horizontal_deviation > 0.15:
            warnings.append(ROTATION_WARNING)
            score -= 30
        elif horizontal_deviation > 0.08:
            warnings.append(SLIGHT_ROTATION_WARNING)
            score -= 15

        # 2. 상하 기울기
        forehead_top = landmarks[L['forehead_top']].y
        chin = landmarks[L['chin_bottom']].y
        nose_y = landmarks[L['nose_tip']].y
        expected_nose_y = forehead_top + (chin - forehead_top) * EXPECTED_NOSE_HEIGHT_RATIO
        vertical_deviation = _normalized_deviation(abs(nose_y - expected_nose_y), chin - forehead_top)

        if vertical_deviation > 0.12:
            warnings.append(TILT_WARNING)
            score -= 25
        elif vertical_deviation > 0.06:
            score -= 10

        # 3. 화면 내 얼굴 크기
        if eye_span < 0.2:
            warnings.append(TOO_FAR_WARNING)
            score -= 20
        elif eye_span > 0.7:
            warnings.append(TOO_CLOSE_WARNING)
            score -= 15

        # 4. 좌우 깊이 차이 (측면 촬영 검출)
        avg_z_left = (landmarks[L['left_cheekbone']].z + landmarks[L['left_temple']].z) / 2
        avg_z_right = (landmarks[L['right_cheekbone']].z + landmarks[L['right_temple']].z) / 2
        z_deviation = abs(avg_z_left - avg_z_right)

        if z_deviation > 0.05:
            warnings.append(DEPTH_ASYMMETRY_WARNING)
            score -= 20

        score = max(0, score)
        logger.debug(
            f"Pose deviations: horizontal={horizontal_deviation:.3f}, "
            f"vertical={vertical_deviation:.3f}, eye_span={eye_span:.3f}, z={z_deviation:.3f} "
            f"-> score={score}"
        )

        return PoseValidation(score=score, warnings=warnings)


def validate_face_pose(landmarks: Sequence[Any]) -> PoseValidation:
    """PoseValidator().validate() 단축 함수"""
    return PoseValidator().validate(landmarks)
