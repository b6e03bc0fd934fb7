"""랜드마크 기반 얼굴 치수 및 비율 추출"""

from typing import Any, Sequence, Tuple

from ..config.constants import AVERAGE_IPD_MM, FACE_SHAPE_LANDMARKS as L
from ..models.landmark_models import FaceMeasurements, FaceRatios
from ..utils.logging_config import get_logger
from .geometry import GeometryCalculator, round_half_up, safe_ratio

logger = get_logger(__name__)


def to_mm(normalized_distance: float, ipd_normalized: float) -> float:
    """
    정규화 거리를 동공간 거리 기준으로 mm 변환

    Args:
        normalized_distance: 정규화 좌표 거리
        ipd_normalized: 정규화 좌표 동공간 거리

    Returns:
        mm 거리 (ipd가 0이면 0)
    """
    if ipd_normalized == 0:
        return 0.0
    return (normalized_distance / ipd_normalized) * AVERAGE_IPD_MM


class MeasurementExtractor:
    """
    얼굴 치수 추출기

    - 치수: 양 눈 바깥쪽 거리를 63mm로 보정하여 mm 단위 정수로 변환
    - 비율: 보정 전 정규화 거리로 계산 (보정 오차가 상쇄됨)
    """

    def __init__(self):
        self.geometry = GeometryCalculator()

    def _pair_distance(self, landmarks: Sequence[Any], first: str, second: str) -> float:
        return self.geometry.distance(landmarks[L[first]], landmarks[L[second]])

    def compute_jaw_angle(self, landmarks: Sequence[Any], side: str) -> float:
        """
        턱 각도 (도 단위)
        - 120도 미만: 각진 턱
        - 140도 초과: 둥근 턱

        Args:
            landmarks: 468개 얼굴 landmarks
            side: 'left' 또는 'right'
        """
        if side not in ('left', 'right'):
            raise ValueError(f"side must be 'left' or 'right', got {side!r}")

        mid = landmarks[L[f'{side}_jaw_mid']]
        vertex = landmarks[L[f'{side}_jaw_angle']]
        lower = landmarks[L[f'{side}_jaw_lower']]
        return self.geometry.angle_at_vertex(mid, vertex, lower)

    def extract(self, landmarks: Sequence[Any]) -> Tuple[FaceMeasurements, FaceRatios]:
        """
        치수 및 비율 추출

        Args:
            landmarks: 468개 얼굴 landmarks

        Returns:
            (FaceMeasurements, FaceRatios) 튜플
        """
        # 보정 기준: 양 눈 바깥쪽 거리
        ipd = self._pair_distance(landmarks, 'left_eye_outer', 'right_eye_outer')
        if ipd == 0:
            logger.warning("Calibration distance is zero; measurements will be 0mm")

        face_length = self._pair_distance(landmarks, 'forehead_top', 'chin_bottom')
        forehead_width = self._pair_distance(landmarks, 'left_forehead_outer', 'right_forehead_outer')
        cheekbone_width = self._pair_distance(landmarks, 'left_cheekbone', 'right_cheekbone')
        jaw_width = self._pair_distance(landmarks, 'left_jaw_angle', 'right_jaw_angle')
        temple_width = self._pair_distance(landmarks, 'left_temple', 'right_temple')
        nose_bridge_width = self._pair_distance(landmarks, 'nose_bridge_left', 'nose_bridge_right')

        measurements = FaceMeasurements(
            face_length_mm=round_half_up(to_mm(face_length, ipd)),
            forehead_width_mm=round_half_up(to_mm(forehead_width, ipd)),
            cheekbone_width_mm=round_half_up(to_mm(cheekbone_width, ipd)),
            jaw_width_mm=round_half_up(to_mm(jaw_width, ipd)),
            temple_width_mm=round_half_up(to_mm(temple_width, ipd)),
            nose_bridge_width_mm=round_half_up(to_mm(nose_bridge_width, ipd)),
        )

        jaw_angle_left = self.compute_jaw_angle(landmarks, 'left')
        jaw_angle_right = self.compute_jaw_angle(landmarks, 'right')

        ratios = FaceRatios(
            length_to_width=safe_ratio(face_length, cheekbone_width),
            forehead_to_jaw=safe_ratio(forehead_width, jaw_width),
            cheek_to_jaw=safe_ratio(cheekbone_width, jaw_width),
            forehead_to_cheek=safe_ratio(forehead_width, cheekbone_width),
            jaw_angle_sharpness=(jaw_angle_left + jaw_angle_right) / 2,
        )

        logger.debug(f"Measurements: {measurements.to_dict()}")
        logger.debug(f"Ratios: {ratios.to_dict()}")

        return measurements, ratios


def extract_measurements(landmarks: Sequence[Any]) -> Tuple[FaceMeasurements, FaceRatios]:
    """MeasurementExtractor().extract() 단축 함수"""
    return MeasurementExtractor().extract(landmarks)
