"""공용 테스트 픽스처: 합성 468점 정면 얼굴"""

import math

import numpy as np
import pytest

from eyewear_face_analyzer.config.constants import FACE_SHAPE_LANDMARKS as L
from eyewear_face_analyzer.models.landmark_models import landmarks_from_array

# 정면, 수평, 적정 거리의 계란형 얼굴
# - 눈 바깥쪽 간격 0.30 (보정 기준 63mm)
# - 얼굴 길이 0.80 / 광대 0.56 / 이마 0.50 / 턱 0.46
# - 턱 각도 138도
FRONTAL_POINTS = {
    'forehead_top': (0.50, 0.10),
    'chin_bottom': (0.50, 0.90),
    'nose_tip': (0.50, 0.10 + 0.80 * 0.55),
    'left_eye_outer': (0.35, 0.40),
    'right_eye_outer': (0.65, 0.40),
    'left_eye_inner': (0.45, 0.40),
    'right_eye_inner': (0.55, 0.40),
    'left_forehead_outer': (0.25, 0.30),
    'right_forehead_outer': (0.75, 0.30),
    'left_temple': (0.20, 0.35),
    'right_temple': (0.80, 0.35),
    'left_cheekbone': (0.22, 0.50),
    'right_cheekbone': (0.78, 0.50),
    'left_jaw_angle': (0.27, 0.75),
    'right_jaw_angle': (0.73, 0.75),
    'left_jaw_mid': (0.27, 0.65),
    'right_jaw_mid': (0.73, 0.65),
    'nose_bridge_left': (0.46, 0.42),
    'nose_bridge_right': (0.54, 0.42),
    'left_cheek_inner': (0.30, 0.48),
    'right_cheek_inner': (0.70, 0.48),
}

JAW_ANGLE_DEGREES = 138.0


def _jaw_lower(vertex, inward: float):
    """꼭짓점 바로 위 점과 JAW_ANGLE_DEGREES를 이루는 아래쪽 점"""
    theta = math.radians(JAW_ANGLE_DEGREES)
    return (vertex[0] + inward * 0.1 * math.sin(theta), vertex[1] - 0.1 * math.cos(theta))


def build_face(overrides=None, z_overrides=None, count=468) -> np.ndarray:
    """
    (count, 3) 랜드마크 배열 생성

    Args:
        overrides: {이름: (x, y)} 좌표 덮어쓰기
        z_overrides: {이름: z} 깊이 덮어쓰기
        count: 랜드마크 개수
    """
    points = np.tile(np.array([0.5, 0.5, 0.0]), (count, 1))

    named = dict(FRONTAL_POINTS)
    named['left_jaw_lower'] = _jaw_lower(FRONTAL_POINTS['left_jaw_angle'], 1)
    named['right_jaw_lower'] = _jaw_lower(FRONTAL_POINTS['right_jaw_angle'], -1)
    named.update(overrides or {})

    for name, (x, y) in named.items():
        if L[name] < count:
            points[L[name], 0] = x
            points[L[name], 1] = y

    for name, z in (z_overrides or {}).items():
        points[L[name], 2] = z

    return points


@pytest.fixture
def face_builder():
    """build_face(overrides, z_overrides)로 Landmark 리스트 생성"""
    def _build(overrides=None, z_overrides=None, count=468):
        return landmarks_from_array(build_face(overrides, z_overrides, count))
    return _build


@pytest.fixture
def frontal_landmarks(face_builder):
    return face_builder()


@pytest.fixture
def frontal_array():
    """정면 얼굴 (468, 3) numpy 배열"""
    return build_face()
