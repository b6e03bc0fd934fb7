"""얼굴 분석 파이프라인 (자세 검증 → 치수 추출 → 얼굴형 분류 → 안경테 추천)"""

from dataclasses import replace
from typing import Any, Optional, Sequence

from ..config.constants import PIPELINE_CONFIDENCE_FLOOR
from ..models.landmark_models import (
    FaceDetectionResult,
    Prescription,
    RecommendationContext,
    as_landmark_sequence,
)
from ..recommendation.frame_logic import (
    calculate_frame_size,
    get_enhanced_recommendations,
    get_frame_suggestions,
)
from ..utils.config_loader import get_config
from ..utils.logging_config import get_logger
from ..utils.validators import validate_landmarks
from .face_shape_classifier import FaceShapeClassifier
from .geometry import round_half_up
from .measurement_extractor import MeasurementExtractor
from .pose_validator import PoseValidator

logger = get_logger(__name__)


class FaceAnalyzer:
    """
    얼굴 분석 파이프라인

    기능:
    - 자세 품질 검증 (0~100 점수 + 경고)
    - 실측 치수 및 비율 추출
    - 7종 얼굴형 분류 (자세 점수로 신뢰도 감쇠)
    - 얼굴형 기본 추천 및 처방 기반 추천
    """

    def __init__(
        self,
        validate_input: Optional[bool] = None,
        min_landmark_count: Optional[int] = None,
    ):
        """
        FaceAnalyzer 초기화

        Args:
            validate_input: 랜드마크 개수 검증 여부 (None이면 설정 파일 값)
            min_landmark_count: 최소 랜드마크 개수 (None이면 설정 파일 값)
        """
        settings = get_config().analysis_settings()

        self.validate_input = settings.validate_landmarks if validate_input is None else bool(validate_input)
        self.min_landmark_count = (
            settings.min_landmark_count if min_landmark_count is None else int(min_landmark_count)
        )

        self.pose_validator = PoseValidator()
        self.measurement_extractor = MeasurementExtractor()
        self.classifier = FaceShapeClassifier()

    def process_face_detection(
        self,
        landmarks: Sequence[Any],
        image_width: int,
        face_image: Any = None,
    ) -> FaceDetectionResult:
        """
        랜드마크로부터 전체 분석 결과 생성

        Args:
            landmarks: 468개 얼굴 landmarks (또는 (N, 3) numpy 배열)
            image_width: 원본 이미지 너비 (px, 현재 계산에 사용하지 않음)
            face_image: 결과에 그대로 전달되는 이미지

        Returns:
            FaceDetectionResult

        Raises:
            LandmarkCountError: 랜드마크 개수가 부족한 경우
        """
        landmarks = as_landmark_sequence(landmarks)
        if self.validate_input:
            validate_landmarks(landmarks, self.min_landmark_count)

        pose = self.pose_validator.validate(landmarks)
        for warning in pose.warnings:
            logger.warning(f"Pose: {warning}")

        measurements, ratios = self.measurement_extractor.extract(landmarks)
        classification = self.classifier.classify(ratios)

        # 자세가 나쁘면 얼굴형 매칭이 좋아도 신뢰도 감소
        confidence = round_half_up(classification.confidence * (pose.score / 100))
        confidence = max(PIPELINE_CONFIDENCE_FLOOR, confidence)

        logger.info(
            f"Face shape: {classification.shape.value} "
            f"(confidence {confidence}%, raw {classification.confidence}%, pose {pose.score})"
        )

        return FaceDetectionResult(
            face_shape=classification.shape,
            frame_size=calculate_frame_size(measurements.cheekbone_width_mm),
            frame_suggestion=get_frame_suggestions(classification.shape),
            face_image=face_image,
            measurements=measurements,
            confidence=confidence,
            ratios=ratios,
            pose_warnings=list(pose.warnings),
            pose_quality=pose.score,
        )

    def apply_recommendations(
        self,
        result: FaceDetectionResult,
        prescription: Optional[Prescription] = None,
        age: Optional[int] = None,
        gender: Optional[str] = None,
    ) -> FaceDetectionResult:
        """
        폼 데이터(처방, 나이, 성별)를 반영한 추천으로 교체한 결과 사본 반환

        Args:
            result: process_face_detection() 결과
            prescription: 양안 처방
            age: 나이
            gender: 성별

        Returns:
            frame_suggestion만 교체된 FaceDetectionResult
        """
        context = RecommendationContext(
            face_shape=result.face_shape,
            measurements=result.measurements,
            prescription=prescription,
            age=age,
            gender=gender,
        )
        return replace(result, frame_suggestion=get_enhanced_recommendations(context))


def process_face_detection(
    landmarks: Sequence[Any],
    image_width: int,
    face_image: Any = None,
) -> FaceDetectionResult:
    """FaceAnalyzer().process_face_detection() 단축 함수"""
    return FaceAnalyzer().process_face_detection(landmarks, image_width, face_image)
