"""얼굴 랜드마크 인덱스 및 시스템 상수 정의"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

# MediaPipe FaceMesh 468 landmarks 측정용 인덱스
FACE_SHAPE_LANDMARKS: Mapping[str, int] = MappingProxyType({
    # 세로 측정 (얼굴 길이)
    'forehead_top': 10,        # 이마 상단
    'chin_bottom': 152,        # 턱 끝

    # 이마 너비 (눈썹 높이)
    'left_forehead_outer': 70,
    'right_forehead_outer': 300,

    # 관자놀이
    'left_temple': 127,
    'right_temple': 356,

    # 광대뼈 (가장 넓은 부분)
    'left_cheekbone': 234,
    'right_cheekbone': 454,

    # 턱 각 (gonion)
    'left_jaw_angle': 172,
    'right_jaw_angle': 397,

    # 턱 각도 계산용 윤곽점
    'left_jaw_mid': 136,
    'right_jaw_mid': 365,
    'left_jaw_lower': 150,
    'right_jaw_lower': 379,

    # 코다리
    'nose_bridge_left': 193,
    'nose_bridge_right': 417,

    # 보조 광대 포인트
    'left_cheek_inner': 116,
    'right_cheek_inner': 345,

    # 중앙부
    'nose_tip': 1,
    'left_eye_outer': 33,
    'right_eye_outer': 263,
    'left_eye_inner': 133,
    'right_eye_inner': 362,
})

# 얼굴 윤곽 (닫힌 루프, 10에서 시작해 10으로 끝남)
FACE_CONTOUR: Tuple[int, ...] = (
    10, 338, 297, 332, 284, 251, 389, 356, 454, 323, 361, 288,
    397, 365, 379, 378, 400, 377, 152, 148, 176, 149, 150, 136,
    172, 58, 132, 93, 234, 127, 162, 21, 54, 103, 67, 109, 10,
)

# 측정 항목별 랜드마크 쌍 (오버레이 렌더링용)
MEASUREMENT_PAIRS: Mapping[str, Tuple[str, str]] = MappingProxyType({
    'faceLength': ('forehead_top', 'chin_bottom'),
    'foreheadWidth': ('left_forehead_outer', 'right_forehead_outer'),
    'cheekboneWidth': ('left_cheekbone', 'right_cheekbone'),
    'jawWidth': ('left_jaw_angle', 'right_jaw_angle'),
    'templeWidth': ('left_temple', 'right_temple'),
    'noseBridge': ('nose_bridge_left', 'nose_bridge_right'),
    'eyes': ('left_eye_outer', 'right_eye_outer'),
})

# 평균 성인 동공간 거리 (mm), 유일한 보정 상수
AVERAGE_IPD_MM = 63.0

# 턱 각도 계산 불가 시 기본값 (둥근 턱으로 간주)
DEGENERATE_JAW_ANGLE = 150.0

# 캐노니컬 FaceMesh 랜드마크 개수 (refine_landmarks 사용 시 478)
CANONICAL_LANDMARK_COUNT = 468

# 파이프라인 최종 신뢰도 하한
PIPELINE_CONFIDENCE_FLOOR = 25

# 프레임 사이즈 계산용 브리지 폭 (mm)
FRAME_BRIDGE_MM = 18


def get_face_contour_indices() -> Tuple[int, ...]:
    """얼굴 윤곽 랜드마크 인덱스 반환 (오버레이용)"""
    return FACE_CONTOUR


def get_measurement_landmarks() -> Dict[str, List[int]]:
    """
    측정 항목별 랜드마크 인덱스 쌍 반환

    Returns:
        {'faceLength': [10, 152], ...} 형식 딕셔너리
    """
    return {
        name: [FACE_SHAPE_LANDMARKS[first], FACE_SHAPE_LANDMARKS[second]]
        for name, (first, second) in MEASUREMENT_PAIRS.items()
    }
