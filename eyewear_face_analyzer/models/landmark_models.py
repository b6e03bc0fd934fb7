"""데이터 모델 정의"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Sequence
from enum import Enum
import numpy as np


class FaceShape(Enum):
    """얼굴형 분류 (7종, 순서가 동점 처리 기준)"""
    OVAL = "Oval"
    ROUND = "Round"
    SQUARE = "Square"
    HEART = "Heart"
    DIAMOND = "Diamond"
    OBLONG = "Oblong"
    TRIANGLE = "Triangle"


class FramePriority(Enum):
    """추천 우선순위"""
    BEST = "best"
    GOOD = "good"
    OKAY = "okay"

    @property
    def rank(self) -> int:
        return {'best': 3, 'good': 2, 'okay': 1}[self.value]


class BridgeFit(Enum):
    """코다리 폭 분류"""
    NARROW = "narrow"
    STANDARD = "standard"
    WIDE = "wide"


class PrescriptionSuitability(Enum):
    """고도수 렌즈 적합도"""
    EXCELLENT = "excellent"
    GOOD = "good"
    LIMITED = "limited"


class AgeAppeal(Enum):
    """연령대 선호도"""
    YOUNG = "young"
    MATURE = "mature"
    UNIVERSAL = "universal"


class PrescriptionStrength(Enum):
    """처방 도수 강도"""
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"


@dataclass(frozen=True)
class Landmark:
    """단일 랜드마크 포인트"""

    x: float  # 정규화 x 좌표 (0-1)
    y: float  # 정규화 y 좌표 (0-1)
    z: float = 0.0  # 깊이 정보 (상대적)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Landmark':
        """{'x', 'y', 'z'} 딕셔너리에서 생성"""
        return cls(x=float(data['x']), y=float(data['y']), z=float(data.get('z', 0.0)))

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {'x': self.x, 'y': self.y, 'z': self.z}


def landmarks_from_array(points: np.ndarray) -> List[Landmark]:
    """
    (N, 2) 또는 (N, 3) 배열을 Landmark 리스트로 변환

    Args:
        points: 정규화 좌표 배열

    Returns:
        Landmark 리스트 (z가 없으면 0.0)
    """
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        raise ValueError(f"Landmark array must have shape (N, 2) or (N, 3), got {arr.shape}")

    if arr.shape[1] == 2:
        return [Landmark(x=float(x), y=float(y)) for x, y in arr]
    return [Landmark(x=float(x), y=float(y), z=float(z)) for x, y, z in arr]


@dataclass(frozen=True)
class FaceMeasurements:
    """실측 얼굴 치수 (mm, 정수 반올림)"""

    face_length_mm: int
    forehead_width_mm: int
    cheekbone_width_mm: int
    jaw_width_mm: int
    temple_width_mm: int
    nose_bridge_width_mm: int

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'faceLengthMm': self.face_length_mm,
            'foreheadWidthMm': self.forehead_width_mm,
            'cheekboneWidthMm': self.cheekbone_width_mm,
            'jawWidthMm': self.jaw_width_mm,
            'templeWidthMm': self.temple_width_mm,
            'noseBridgeWidthMm': self.nose_bridge_width_mm,
        }


@dataclass(frozen=True)
class FaceRatios:
    """무차원 얼굴 비율 (jaw_angle_sharpness는 도 단위)"""

    length_to_width: float
    forehead_to_jaw: float
    cheek_to_jaw: float
    forehead_to_cheek: float
    jaw_angle_sharpness: float

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'lengthToWidth': self.length_to_width,
            'foreheadToJaw': self.forehead_to_jaw,
            'cheekToJaw': self.cheek_to_jaw,
            'foreheadToCheek': self.forehead_to_cheek,
            'jawAngleSharpness': self.jaw_angle_sharpness,
        }


@dataclass
class PoseValidation:
    """자세 품질 검증 결과"""

    score: int = 100
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'score': self.score, 'warnings': list(self.warnings)}


@dataclass(frozen=True)
class ClassificationResult:
    """얼굴형 분류 결과"""

    shape: FaceShape
    confidence: int  # 35 ~ 98
    scores: Dict[FaceShape, int] = field(default_factory=dict, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shape': self.shape.value,
            'confidence': self.confidence,
            'scores': {shape.value: score for shape, score in self.scores.items()},
        }


@dataclass(frozen=True)
class PrescriptionEye:
    """한쪽 눈 처방 (값이 없으면 None)"""

    spherical: Optional[float] = None
    cylindrical: Optional[float] = None
    axis: Optional[float] = None
    prism: Optional[float] = None
    base: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'PrescriptionEye':
        data = data or {}

        def _number(key: str) -> Optional[float]:
            value = data.get(key)
            if value is None or value == "":
                return None
            return float(value)

        return cls(
            spherical=_number('spherical'),
            cylindrical=_number('cylindrical'),
            axis=_number('axis'),
            prism=_number('prism'),
            base=str(data.get('base') or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'spherical': self.spherical,
            'cylindrical': self.cylindrical,
            'axis': self.axis,
            'prism': self.prism,
            'base': self.base,
        }


@dataclass(frozen=True)
class Prescription:
    """양안 처방"""

    right_eye: PrescriptionEye = field(default_factory=PrescriptionEye)
    left_eye: PrescriptionEye = field(default_factory=PrescriptionEye)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Prescription':
        """{'rightEye': {...}, 'leftEye': {...}} 형식에서 생성"""
        return cls(
            right_eye=PrescriptionEye.from_dict(data.get('rightEye')),
            left_eye=PrescriptionEye.from_dict(data.get('leftEye')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rightEye': self.right_eye.to_dict(),
            'leftEye': self.left_eye.to_dict(),
        }


@dataclass(frozen=True)
class PrescriptionAnalysis:
    """처방 강도 분석 결과"""

    strength: PrescriptionStrength = PrescriptionStrength.NONE
    needs_full_rim: bool = False
    notes: List[str] = field(default_factory=list)


@dataclass
class FrameRecommendation:
    """안경테 추천 항목"""

    type: str
    reason: str
    priority: FramePriority
    bridge_fit: Optional[BridgeFit] = None
    prescription_note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환 (미설정 선택 필드는 생략)"""
        result = {
            'type': self.type,
            'reason': self.reason,
            'priority': self.priority.value,
        }
        if self.bridge_fit is not None:
            result['bridgeFit'] = self.bridge_fit.value
        if self.prescription_note is not None:
            result['prescriptionNote'] = self.prescription_note
        return result


@dataclass(frozen=True)
class RecommendationContext:
    """추천 엔진 입력"""

    face_shape: FaceShape
    measurements: FaceMeasurements
    prescription: Optional[Prescription] = None
    age: Optional[int] = None
    gender: Optional[str] = None


@dataclass
class FaceDetectionResult:
    """파이프라인 최종 결과"""

    face_shape: FaceShape
    frame_size: str
    frame_suggestion: List[FrameRecommendation]
    face_image: Any  # 외부에서 전달받은 이미지 (해석하지 않음)
    measurements: FaceMeasurements
    confidence: int
    ratios: FaceRatios
    pose_warnings: List[str] = field(default_factory=list)
    pose_quality: int = 100

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'faceShape': self.face_shape.value,
            'frameSize': self.frame_size,
            'frameSuggestion': [rec.to_dict() for rec in self.frame_suggestion],
            'faceImage': self.face_image,
            'measurements': self.measurements.to_dict(),
            'confidence': self.confidence,
            'ratios': self.ratios.to_dict(),
            'poseWarnings': list(self.pose_warnings),
            'poseQuality': self.pose_quality,
        }


def as_landmark_sequence(landmarks: Any) -> Sequence[Any]:
    """
    입력을 랜드마크 시퀀스로 정규화

    - numpy 배열: Landmark 리스트로 변환
    - MediaPipe NormalizedLandmarkList (.landmark 속성): Landmark 리스트로 변환
    - 그 외: 그대로 반환
    """
    if isinstance(landmarks, np.ndarray):
        return landmarks_from_array(landmarks)
    if hasattr(landmarks, "landmark"):
        return [Landmark(x=lm.x, y=lm.y, z=lm.z) for lm in landmarks.landmark]
    return landmarks
