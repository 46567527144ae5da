"""커스텀 예외 클래스 정의

점수 계산 코어는 예외를 던지지 않는다 (잘못된 랜드마크 → 기본 결과).
아래 예외는 설정/파일/이미지 입출력 경계에서만 사용된다.
"""


class SkinAgeAnalyzerException(Exception):
    """기본 예외 클래스"""
    pass


class ConfigurationError(SkinAgeAnalyzerException):
    """설정 오류 예외"""
    pass


class LandmarkInputError(SkinAgeAnalyzerException):
    """랜드마크 세션 파일 형식 오류 예외"""
    pass


class DetectionError(SkinAgeAnalyzerException):
    """얼굴 검출기 초기화/이미지 입력 실패 예외"""
    pass
