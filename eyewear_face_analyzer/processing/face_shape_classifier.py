"""비율 기반 다중 기준 얼굴형 분류"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Tuple

from ..models.landmark_models import ClassificationResult, FaceRatios, FaceShape
from ..utils.logging_config import get_logger
from .geometry import round_half_up

logger = get_logger(__name__)

Predicate = Callable[[float], bool]

# 점수 정규화 기준 (가능한 최대 점수 근사치)
MAX_PLAUSIBLE_SCORE = 15
MIN_CONFIDENCE = 35
MAX_CONFIDENCE = 98


def between(low: float, high: float) -> Predicate:
    """low <= v <= high"""
    return lambda v: low <= v <= high


def strictly_between(low: float, high: float) -> Predicate:
    """low < v < high"""
    return lambda v: low < v < high


def above(threshold: float) -> Predicate:
    return lambda v: v > threshold


def below(threshold: float) -> Predicate:
    return lambda v: v < threshold


def near_one(tolerance: float) -> Predicate:
    """|v - 1| < tolerance"""
    return lambda v: abs(v - 1) < tolerance


def outside(low: float, high: float) -> Predicate:
    """v < low 또는 v > high"""
    return lambda v: v < low or v > high


@dataclass(frozen=True)
class ScoringRule:
    """
    단일 비율에 대한 점수 규칙

    tiers는 (조건, 점수) 목록이며 처음 만족하는 조건 하나만 적용된다.
    """

    ratio: str
    tiers: Tuple[Tuple[Predicate, int], ...]

    def evaluate(self, ratios: FaceRatios) -> int:
        value = getattr(ratios, self.ratio)
        for predicate, points in self.tiers:
            if predicate(value):
                return points
        return 0


def rule(ratio: str, *tiers: Tuple[Predicate, int]) -> ScoringRule:
    return ScoringRule(ratio=ratio, tiers=tuple(tiers))


# 얼굴형별 점수 규칙 표 (순서가 동점 처리 기준)
SHAPE_RULES: Mapping[FaceShape, Tuple[ScoringRule, ...]] = MappingProxyType({
    # 균형 잡힌 비율, 이마가 턱보다 약간 넓고 부드러운 턱선
    FaceShape.OVAL: (
        rule('length_to_width', (between(1.3, 1.5), 4), (between(1.2, 1.6), 2), (between(1.15, 1.7), 1)),
        rule('forehead_to_jaw', (between(1.05, 1.25), 3), (between(1.0, 1.3), 1)),
        rule('forehead_to_cheek', (between(0.85, 0.98), 2)),
        rule('cheek_to_jaw', (between(1.05, 1.25), 2)),
        rule('jaw_angle_sharpness', (strictly_between(130, 145), 2)),
    ),
    # 길이와 너비가 비슷하고 매우 둥근 턱
    FaceShape.ROUND: (
        rule('length_to_width', (between(1.0, 1.2), 4), (between(0.9, 1.3), 2), (outside(0.9, 1.3), -1)),
        rule('forehead_to_jaw', (near_one(0.1), 3), (near_one(0.15), 1)),
        rule('cheek_to_jaw', (between(1.0, 1.12), 2)),
        rule('forehead_to_cheek', (near_one(0.1), 1)),
        rule('jaw_angle_sharpness', (above(140), 3), (above(135), 1)),
    ),
    # 이마와 턱 너비가 비슷하고 각진 턱
    FaceShape.SQUARE: (
        rule('length_to_width', (between(1.0, 1.25), 3), (between(0.9, 1.3), 1)),
        rule('forehead_to_jaw', (near_one(0.08), 4), (near_one(0.12), 2)),
        rule('cheek_to_jaw', (between(0.95, 1.1), 2)),
        rule('forehead_to_cheek', (near_one(0.1), 1)),
        rule('jaw_angle_sharpness', (below(120), 4), (below(130), 2), (above(135), -2)),
    ),
    # 넓은 이마, 좁고 뾰족한 턱
    FaceShape.HEART: (
        rule('forehead_to_jaw', (above(1.3), 4), (above(1.2), 2), (above(1.1), 1)),
        rule('forehead_to_cheek', (above(0.95), 2), (above(0.88), 1)),
        rule('cheek_to_jaw', (above(1.25), 2), (above(1.15), 1)),
        rule('length_to_width', (between(1.2, 1.6), 1)),
        rule('jaw_angle_sharpness', (above(125), 1)),
    ),
    # 광대가 가장 넓고 이마와 턱이 모두 좁음
    FaceShape.DIAMOND: (
        rule('forehead_to_cheek', (below(0.82), 4), (below(0.88), 2), (below(0.92), 1)),
        rule('cheek_to_jaw', (above(1.25), 3), (above(1.15), 2)),
        rule('forehead_to_jaw', (strictly_between(1.02, 1.2), 2)),
        rule('length_to_width', (between(1.25, 1.6), 1)),
    ),
    # 길고 좁으며 폭이 평행한 얼굴
    FaceShape.OBLONG: (
        rule('length_to_width', (above(1.6), 5), (above(1.5), 3), (above(1.4), 1), (below(1.3), -1)),
        rule('forehead_to_jaw', (near_one(0.12), 2), (near_one(0.18), 1)),
        rule('forehead_to_cheek', (near_one(0.1), 1)),
        rule('cheek_to_jaw', (near_one(0.12), 1)),
    ),
    # 좁은 이마, 넓은 턱 (하트형의 반대)
    FaceShape.TRIANGLE: (
        rule('forehead_to_jaw', (below(0.8), 5), (below(0.9), 3), (below(0.95), 1)),
        rule('cheek_to_jaw', (below(1.08), 2), (below(1.15), 1)),
        rule('forehead_to_cheek', (below(0.9), 1)),
        rule('length_to_width', (between(1.1, 1.5), 1)),
    ),
})


class FaceShapeClassifier:
    """
    얼굴형 분류기

    7가지 얼굴형 각각에 대해 규칙 표로 점수를 누적하고,
    최고 점수와 2, 3위와의 차이로 신뢰도를 계산한다.
    """

    def __init__(self, rules: Mapping[FaceShape, Tuple[ScoringRule, ...]] = None):
        self.rules = SHAPE_RULES if rules is None else rules

    def score_shapes(self, ratios: FaceRatios) -> Dict[FaceShape, int]:
        """얼굴형별 점수 계산 (FaceShape 열거 순서 유지)"""
        return {
            shape: sum(r.evaluate(ratios) for r in self.rules.get(shape, ()))
            for shape in FaceShape
        }

    @staticmethod
    def compute_confidence(ranked_scores: List[int]) -> int:
        """
        신뢰도 계산

        Args:
            ranked_scores: 내림차순 정렬된 점수 (최소 3개)

        Returns:
            35 ~ 98 범위 정수 신뢰도
        """
        best, second, third = ranked_scores[0], ranked_scores[1], ranked_scores[2]

        margin1 = max(0, best - second)
        margin2 = max(0, second - third)

        base = min(60, (best / MAX_PLAUSIBLE_SCORE) * 60)
        margin_bonus = min(30, (margin1 / 5) * 30)
        clarity_bonus = min(10, (margin2 / 3) * 10)

        confidence = round_half_up(base + margin_bonus + clarity_bonus)
        return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, confidence))

    def classify(self, ratios: FaceRatios) -> ClassificationResult:
        """
        얼굴형 분류

        Args:
            ratios: 얼굴 비율

        Returns:
            ClassificationResult: 최고 점수 얼굴형과 신뢰도
        """
        scores = self.score_shapes(ratios)

        # 안정 정렬: 동점이면 열거 순서(Oval, Round, ...)가 앞선다
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        best_shape = ranked[0][0]
        confidence = self.compute_confidence([score for _, score in ranked])

        logger.debug("Shape scores: " + ", ".join(f"{s.value}={v}" for s, v in ranked))

        return ClassificationResult(shape=best_shape, confidence=confidence, scores=scores)


def classify_face_shape(ratios: FaceRatios) -> ClassificationResult:
    """FaceShapeClassifier().classify() 단축 함수"""
    return FaceShapeClassifier().classify(ratios)
