"""랜드마크 JSON 파일 분석 명령행 도구"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .models.landmark_models import Landmark, Prescription
from .processing.face_analyzer import FaceAnalyzer
from .utils.exceptions import FaceAnalysisException
from .utils.json_exporter import save_json, to_json_string
from .utils.logging_config import get_logger
from .utils.validators import validate_prescription

logger = get_logger(__name__)


def load_landmarks(path: Path, default_width: int = 0) -> Tuple[List[Landmark], int]:
    """
    랜드마크 JSON 로드

    지원 형식:
    - [{"x": .., "y": .., "z": ..}, ...]
    - {"landmarks": [...], "imageWidth": 640}

    Returns:
        (Landmark 리스트, 이미지 너비) 튜플. imageWidth가 없으면 default_width
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    image_width = default_width
    if isinstance(data, dict):
        image_width = int(data.get('imageWidth', default_width))
        data = data.get('landmarks', [])

    return [Landmark.from_dict(point) for point in data], image_width


def load_prescription(path: Optional[Path]) -> Optional[Prescription]:
    if path is None:
        return None
    with open(path, 'r', encoding='utf-8') as f:
        return Prescription.from_dict(json.load(f))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='eyewear-analyze',
        description='Classify face shape and recommend eyewear frames from face mesh landmarks',
    )
    parser.add_argument('landmarks', type=Path, help='Landmark JSON file')
    parser.add_argument('--prescription', type=Path, default=None, help='Prescription JSON file')
    parser.add_argument('--age', type=int, default=None)
    parser.add_argument('--gender', type=str, default=None)
    parser.add_argument('--image-width', type=int, default=0, help='Source image width (px)')
    parser.add_argument('--output', '-o', type=Path, default=None, help='Write result JSON to this path')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        landmarks, image_width = load_landmarks(args.landmarks, args.image_width)
        prescription = load_prescription(args.prescription)
        validate_prescription(prescription)

        analyzer = FaceAnalyzer()
        result = analyzer.process_face_detection(landmarks, image_width)

        if prescription is not None or args.age is not None or args.gender is not None:
            result = analyzer.apply_recommendations(
                result,
                prescription=prescription,
                age=args.age,
                gender=args.gender,
            )
    except (OSError, ValueError, KeyError, TypeError, FaceAnalysisException) as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    if args.output:
        save_json(result, str(args.output), include_image=False)
        logger.info(f"Saved result to: {args.output}")
    else:
        print(to_json_string(result, include_image=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
