"""분석 파이프라인 설정 클래스 정의"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .constants import CANONICAL_LANDMARK_COUNT, FACE_SHAPE_LANDMARKS

# 측정에 쓰는 가장 큰 인덱스보다 적은 개수는 허용하지 않음
_MIN_USABLE_COUNT = max(FACE_SHAPE_LANDMARKS.values()) + 1


@dataclass(frozen=True)
class AnalysisSettings:
    """얼굴 분석 설정"""

    validate_landmarks: bool = True  # 파이프라인 실행 전 입력 검증
    min_landmark_count: int = CANONICAL_LANDMARK_COUNT  # 478: refine_landmarks 사용 시

    def __post_init__(self):
        """설정 값 검증"""
        if self.min_landmark_count < _MIN_USABLE_COUNT:
            raise ValueError(
                f"min_landmark_count must be >= {_MIN_USABLE_COUNT}, got {self.min_landmark_count}"
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'AnalysisSettings':
        """config.yaml의 analysis 섹션에서 생성 (없는 키는 기본값)"""
        data = data or {}
        return cls(
            validate_landmarks=bool(data.get('validate_landmarks', True)),
            min_landmark_count=int(data.get('min_landmark_count', CANONICAL_LANDMARK_COUNT)),
        )
