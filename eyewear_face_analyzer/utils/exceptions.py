"""얼굴 분석 예외 계층"""


class FaceAnalysisException(Exception):
    """패키지 공통 기본 예외"""


class ConfigurationError(FaceAnalysisException):
    """config.yaml 형식/값 오류"""


class InvalidLandmarkError(FaceAnalysisException, ValueError):
    """랜드마크 입력이 계약을 어긴 경우"""


class LandmarkCountError(InvalidLandmarkError, IndexError):
    """
    랜드마크 개수 부족

    고정 인덱스 접근이 범위를 벗어나는 상황이므로 IndexError로도 잡힌다.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected at least {expected} landmarks, got {actual}")


class InvalidPrescriptionError(FaceAnalysisException, ValueError):
    """처방 값이 허용 범위를 벗어난 경우"""
