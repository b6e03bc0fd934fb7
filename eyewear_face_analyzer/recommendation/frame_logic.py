"""얼굴형/처방/치수 기반 안경테 추천"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from ..config.constants import FRAME_BRIDGE_MM
from ..models.landmark_models import (
    AgeAppeal,
    BridgeFit,
    FaceShape,
    FramePriority,
    FrameRecommendation,
    Prescription,
    PrescriptionAnalysis,
    PrescriptionStrength,
    PrescriptionSuitability,
    RecommendationContext,
)
from ..processing.geometry import round_half_up
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

FULL_RIM_WARNING = (
    'May not provide adequate support for your prescription strength. '
    'Consider full-rim alternatives.'
)
FULL_RIM_PRAISE = 'Excellent choice for your prescription strength - provides secure lens support.'
# 정렬 시 경고 여부 판별용 문구
FULL_RIM_WARNING_MARKER = 'not provide adequate'

PRISM_NOTE = 'Prism correction requires sturdy full-rim frames'
ASTIGMATISM_NOTE = 'High astigmatism: choose frames with stable lens positioning'

STRENGTH_NOTES: Mapping[PrescriptionStrength, Tuple[str, ...]] = MappingProxyType({
    PrescriptionStrength.NONE: (),
    PrescriptionStrength.LOW: (
        'Your prescription works well with any frame style',
    ),
    PrescriptionStrength.MODERATE: (
        'Smaller frames will minimize lens thickness',
    ),
    PrescriptionStrength.HIGH: (
        'Choose full-rim frames to secure thicker lenses',
        'Smaller, rounder lens shapes reduce edge thickness',
    ),
    PrescriptionStrength.VERY_HIGH: (
        'Full-rim frames highly recommended for lens support',
        'Smaller frames significantly improve appearance',
        'Consider high-index lenses to reduce thickness',
    ),
})


@dataclass(frozen=True)
class FrameConfig:
    """얼굴형별 기본 안경테 항목"""

    type: str
    reason: str
    priority: FramePriority
    prescription_suitability: PrescriptionSuitability
    age_appeal: AgeAppeal


def _frame(type_: str, reason: str, priority: str, suitability: str, appeal: str) -> FrameConfig:
    return FrameConfig(
        type=type_,
        reason=reason,
        priority=FramePriority(priority),
        prescription_suitability=PrescriptionSuitability(suitability),
        age_appeal=AgeAppeal(appeal),
    )


FRAME_SUGGESTION_MAP: Mapping[FaceShape, Tuple[FrameConfig, ...]] = MappingProxyType({
    FaceShape.OVAL: (
        _frame('Wayfarer', 'Classic shape that complements your balanced proportions', 'best', 'excellent', 'universal'),
        _frame('Aviator', 'Enhances your natural symmetry with a timeless look', 'best', 'good', 'universal'),
        _frame('Cat Eye', 'Adds stylish lift while maintaining balance', 'good', 'good', 'young'),
        _frame('Rectangular', 'Adds structure without overwhelming your features', 'good', 'excellent', 'mature'),
        _frame('Round', 'Creates a soft, harmonious look with your face shape', 'okay', 'good', 'young'),
        _frame('Browline', 'Adds definition to the brow area gracefully', 'okay', 'excellent', 'mature'),
    ),
    FaceShape.ROUND: (
        _frame('Rectangular', 'Adds angular definition to balance soft curves', 'best', 'excellent', 'universal'),
        _frame('Square', 'Creates contrast and adds structure to round features', 'best', 'excellent', 'mature'),
        _frame('Geometric', 'Sharp angles provide strong visual contrast', 'good', 'good', 'young'),
        _frame('Browline', 'Draws attention upward and adds width at the top', 'good', 'excellent', 'mature'),
        _frame('Wayfarer', 'Slightly angular shape provides subtle definition', 'okay', 'excellent', 'universal'),
    ),
    FaceShape.SQUARE: (
        _frame('Round', 'Softens strong angular jawline for a balanced look', 'best', 'good', 'universal'),
        _frame('Oval', 'Curves complement and soften square features', 'best', 'excellent', 'universal'),
        _frame('Aviator', 'Teardrop shape contrasts well with angular jawline', 'good', 'good', 'universal'),
        _frame('Rimless', 'Minimalist frame does not add more angularity', 'good', 'limited', 'mature'),
        _frame('Cat Eye', 'Upswept shape softens and lifts square proportions', 'okay', 'good', 'young'),
    ),
    FaceShape.HEART: (
        _frame('Aviator', 'Wider bottom balances a broad forehead perfectly', 'best', 'good', 'universal'),
        _frame('Rimless', 'Lightweight design keeps focus on your best features', 'best', 'limited', 'mature'),
        _frame('Round', 'Soft curves complement a pointed chin line', 'good', 'good', 'universal'),
        _frame('Light Bottom-Heavy', 'Adds width to the lower face for symmetry', 'good', 'good', 'young'),
        _frame('Oval', 'Gentle curves balance forehead-chin ratio', 'okay', 'excellent', 'universal'),
    ),
    FaceShape.DIAMOND: (
        _frame('Cat Eye', 'Accentuates cheekbones and adds width at brow level', 'best', 'good', 'young'),
        _frame('Oval', 'Soft curves balance prominent cheekbones', 'best', 'excellent', 'universal'),
        _frame('Semi-Rimless', 'Adds subtle width at the top without bulk', 'good', 'good', 'mature'),
        _frame('Rimless', 'Clean lines complement angular features', 'good', 'limited', 'mature'),
        _frame('Browline', 'Adds definition to the forehead area', 'okay', 'excellent', 'mature'),
    ),
    FaceShape.OBLONG: (
        _frame('Oversized', 'Wide frames shorten the appearance of face length', 'best', 'good', 'young'),
        _frame('Wayfarer', 'Bold shape adds width and visual breaks to face length', 'best', 'excellent', 'universal'),
        _frame('Square', 'Wide square frames create horizontal balance', 'good', 'excellent', 'mature'),
        _frame('Round', 'Curves break vertical lines and add width', 'good', 'good', 'universal'),
        _frame('Aviator', 'Wide lens area covers more vertical space', 'okay', 'good', 'universal'),
    ),
    FaceShape.TRIANGLE: (
        _frame('Cat Eye', 'Wider top frames balance a broader jaw perfectly', 'best', 'good', 'young'),
        _frame('Browline', 'Heavy top gives visual width to the forehead', 'best', 'excellent', 'mature'),
        _frame('Aviator', 'Wide top contrasts and balances jaw width', 'good', 'good', 'universal'),
        _frame('Semi-Rimless', 'Bold top half adds needed upper-face definition', 'good', 'good', 'mature'),
        _frame('Round', 'Curved frames soften strong jaw angles', 'okay', 'good', 'universal'),
    ),
})


def _abs_or_zero(value: Optional[float]) -> float:
    """None, 0, NaN(빈 폼 입력)은 0으로 취급"""
    if not value or math.isnan(value):
        return 0.0
    return abs(value)


def analyze_prescription(prescription: Optional[Prescription]) -> PrescriptionAnalysis:
    """
    처방 강도 분석

    강도 = max(|구면|) + 0.5 * max(|난시|)
    - 0: none / 2.0 이하: low / 4.0 이하: moderate / 6.0 이하: high / 초과: very-high
    - moderate 이상 또는 프리즘 처방이 있으면 풀림 필요

    Args:
        prescription: 양안 처방 (없으면 None)

    Returns:
        PrescriptionAnalysis
    """
    if prescription is None:
        return PrescriptionAnalysis()

    right = prescription.right_eye
    left = prescription.left_eye

    max_sph = max(_abs_or_zero(right.spherical), _abs_or_zero(left.spherical))
    max_cyl = max(_abs_or_zero(right.cylindrical), _abs_or_zero(left.cylindrical))
    total_strength = max_sph + max_cyl * 0.5  # 난시는 절반만 반영

    if total_strength == 0:
        strength = PrescriptionStrength.NONE
    elif total_strength <= 2.0:
        strength = PrescriptionStrength.LOW
    elif total_strength <= 4.0:
        strength = PrescriptionStrength.MODERATE
    elif total_strength <= 6.0:
        strength = PrescriptionStrength.HIGH
    else:
        strength = PrescriptionStrength.VERY_HIGH

    notes = list(STRENGTH_NOTES[strength])
    needs_full_rim = strength in (
        PrescriptionStrength.MODERATE,
        PrescriptionStrength.HIGH,
        PrescriptionStrength.VERY_HIGH,
    )

    # 프리즘 처방은 렌즈가 두꺼워짐
    if _abs_or_zero(right.prism) > 0 or _abs_or_zero(left.prism) > 0:
        notes.append(PRISM_NOTE)
        needs_full_rim = True

    if max_cyl > 2.0:
        notes.append(ASTIGMATISM_NOTE)

    logger.debug(
        f"Prescription strength: {total_strength:.2f} ({strength.value}), "
        f"full rim: {needs_full_rim}"
    )

    return PrescriptionAnalysis(strength=strength, needs_full_rim=needs_full_rim, notes=notes)


def analyze_bridge_fit(nose_bridge_width_mm: float) -> BridgeFit:
    """코다리 폭 분류: 16mm 미만 narrow, 21mm 초과 wide"""
    if nose_bridge_width_mm < 16:
        return BridgeFit.NARROW
    if nose_bridge_width_mm > 21:
        return BridgeFit.WIDE
    return BridgeFit.STANDARD


def _has_full_rim_warning(rec: FrameRecommendation) -> bool:
    return bool(rec.prescription_note) and FULL_RIM_WARNING_MARKER in rec.prescription_note


def get_enhanced_recommendations(context: RecommendationContext) -> List[FrameRecommendation]:
    """
    처방, 연령, 코다리 폭을 반영한 추천 목록

    Args:
        context: RecommendationContext

    Returns:
        우선순위 순으로 정렬된 FrameRecommendation 리스트
    """
    base_frames = FRAME_SUGGESTION_MAP.get(context.face_shape, ())
    analysis = analyze_prescription(context.prescription)
    bridge_fit = analyze_bridge_fit(context.measurements.nose_bridge_width_mm)

    recommendations = []
    for frame in base_frames:
        rec = FrameRecommendation(
            type=frame.type,
            reason=frame.reason,
            priority=frame.priority,
            bridge_fit=bridge_fit,
        )

        # 풀림이 필요하면 무테/반무테 강등
        if analysis.needs_full_rim:
            if 'rimless' in frame.type.lower():
                rec.priority = FramePriority.OKAY
                rec.prescription_note = FULL_RIM_WARNING
            elif frame.prescription_suitability is PrescriptionSuitability.EXCELLENT:
                rec.prescription_note = FULL_RIM_PRAISE

        # 연령 조정: 조건만 확인하고 순위는 바꾸지 않음
        if context.age:
            if context.age < 30 and frame.age_appeal is AgeAppeal.MATURE:
                pass
            elif context.age >= 50 and frame.age_appeal is AgeAppeal.YOUNG:
                pass

        recommendations.append(rec)

    def sort_key(rec: FrameRecommendation):
        warning_rank = int(_has_full_rim_warning(rec)) if analysis.needs_full_rim else 0
        return (-rec.priority.rank, warning_rank)

    recommendations.sort(key=sort_key)

    # 일반 처방 안내를 최상위 추천에 첨부
    if recommendations and analysis.notes:
        top = recommendations[0]
        if not top.prescription_note:
            top.prescription_note = analysis.notes[0]

    logger.debug(
        f"Recommendations for {context.face_shape.value}: "
        f"{[(r.type, r.priority.value) for r in recommendations]}"
    )

    return recommendations


def get_frame_suggestions(face_shape: FaceShape) -> List[FrameRecommendation]:
    """처방 정보 없이 얼굴형 기본 추천 목록 반환 (bridge_fit, note 없음)"""
    return [
        FrameRecommendation(type=frame.type, reason=frame.reason, priority=frame.priority)
        for frame in FRAME_SUGGESTION_MAP.get(face_shape, ())
    ]


def calculate_frame_size(cheekbone_width_mm: int) -> str:
    """
    광대 폭으로 표준 안경 사이즈 계산

    렌즈 폭 = (전체 폭 - 브리지 18mm) / 2

    Args:
        cheekbone_width_mm: 광대 폭 (mm)

    Returns:
        "<Band> (<lens>mm lens / <total>mm total)" 형식 문자열
    """
    lens_width_mm = round_half_up((cheekbone_width_mm - FRAME_BRIDGE_MM) / 2)

    if lens_width_mm <= 47:
        band = 'Small'
    elif lens_width_mm <= 52:
        band = 'Medium'
    elif lens_width_mm <= 57:
        band = 'Large'
    else:
        band = 'Extra Large'

    return f"{band} ({lens_width_mm}mm lens / {cheekbone_width_mm}mm total)"
