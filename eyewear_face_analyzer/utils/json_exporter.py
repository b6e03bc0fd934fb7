"""
분석 결과를 제출/저장용 JSON으로 변환
"""
import json
import os
from typing import Any, Dict, Optional

from ..models.landmark_models import FaceDetectionResult

# 제출 페이로드에 평탄화되는 치수 키
MEASUREMENT_KEYS = (
    'faceLengthMm',
    'foreheadWidthMm',
    'cheekboneWidthMm',
    'jawWidthMm',
    'templeWidthMm',
    'noseBridgeWidthMm',
)


def to_submission_payload(
    result: FaceDetectionResult,
    form_data: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    분석 결과를 저장 서버 제출용 딕셔너리로 변환
    폼 데이터 위에 얼굴형, 신뢰도, 사이즈, 추천, 치수를 덮어쓴다.

    Args:
        result: FaceDetectionResult
        form_data: 사용자 폼 데이터 (이름, 나이, 처방 등)

    Returns:
        dict: JSON 직렬화 가능한 딕셔너리
    """
    payload = dict(form_data or {})
    measurements = result.measurements.to_dict()

    payload.update({
        'faceShape': result.face_shape.value,
        'confidence': result.confidence,
        'frameSize': result.frame_size,
        'frameSuggestion': [rec.to_dict() for rec in result.frame_suggestion],
    })
    for key in MEASUREMENT_KEYS:
        payload[key] = measurements[key]

    return payload


def to_json_string(result: FaceDetectionResult, include_image: bool = True) -> str:
    """
    분석 결과를 JSON 문자열로 변환

    Args:
        result: FaceDetectionResult
        include_image: False면 faceImage 필드 제외
    """
    data = result.to_dict()
    if not include_image:
        data.pop('faceImage', None)
    return json.dumps(data, indent=2, ensure_ascii=False)


def save_json(result: FaceDetectionResult, output_path: str, include_image: bool = True) -> Dict[str, Any]:
    """
    분석 결과를 JSON 파일로 저장

    Args:
        result: FaceDetectionResult
        output_path: 저장할 JSON 파일 경로
        include_image: False면 faceImage 필드 제외

    Returns:
        저장된 딕셔너리
    """
    dir_path = os.path.dirname(output_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    json_data = json.loads(to_json_string(result, include_image=include_image))

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(json_data, f, indent=2, ensure_ascii=False)

    return json_data
