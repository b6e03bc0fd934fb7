"""얼굴 기하학 계산 유틸리티"""

import math
from typing import Any

import numpy as np

from ..config.constants import DEGENERATE_JAW_ANGLE


def round_half_up(value: float) -> int:
    """0.5를 올림하는 반올림 (Python round()의 은행가 반올림 대신 사용)"""
    return int(math.floor(value + 0.5))


def safe_ratio(numerator: float, denominator: float) -> float:
    """분모가 0이면 0.0 반환"""
    if denominator == 0:
        return 0.0
    return numerator / denominator


class GeometryCalculator:
    """얼굴 기하학 계산"""

    @staticmethod
    def distance(p1: Any, p2: Any) -> float:
        """
        두 랜드마크 간 2D 유클리드 거리 (z 무시)

        Args:
            p1, p2: x, y 속성을 가진 포인트

        Returns:
            거리 (정규화 좌표 기준)
        """
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return math.sqrt(dx**2 + dy**2)

    @staticmethod
    def angle_at_vertex(a: Any, b: Any, c: Any) -> float:
        """
        꼭짓점 b에서 a, c 방향 벡터가 이루는 각도

        Args:
            a: 첫 번째 끝점
            b: 꼭짓점
            c: 두 번째 끝점

        Returns:
            각도 (도, 0 ~ 180). 벡터 길이가 0이면 150.
        """
        ba = np.array([a.x - b.x, a.y - b.y], dtype=float)
        bc = np.array([c.x - b.x, c.y - b.y], dtype=float)

        mag_ba = float(np.hypot(*ba))
        mag_bc = float(np.hypot(*bc))

        if mag_ba == 0 or mag_bc == 0:
            return DEGENERATE_JAW_ANGLE

        # 부동소수점 오차로 acos 정의역을 벗어나지 않도록 clip
        cos_angle = float(np.clip(np.dot(ba, bc) / (mag_ba * mag_bc), -1.0, 1.0))
        return math.degrees(math.acos(cos_angle))


distance = GeometryCalculator.distance
angle_at_vertex = GeometryCalculator.angle_at_vertex
