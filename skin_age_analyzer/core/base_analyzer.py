"""부위별 분석기 공통 기반 클래스"""

import math
from typing import List, Optional, Sequence

from ..models.landmark_models import Landmark
from ..utils import get_config, get_logger
from .geometry import GeometryCalculator

logger = get_logger(__name__)


class BaseFeatureAnalyzer:
    """
    부위별 분석기 공통 로직

    - 주 랜드마크 검증 (존재 여부, 최소 개수, 유한 좌표, 최소 얼굴 스케일)
    - 검증 실패 시 예외 대신 default_result() 반환
    - 보조 포즈(smile/down) 유효성 판정

    하위 클래스는 name, default_result(), _analyze()를 구현한다.
    """

    name = 'feature'
    use_3d_scale = False

    def __init__(
        self,
        min_landmarks: Optional[int] = None,
        min_face_scale: Optional[float] = None,
    ):
        """
        Args:
            min_landmarks: 유효 랜드마크 세트의 최소 개수 (None이면 config)
            min_face_scale: 최소 이마-턱 거리 (None이면 config)
        """
        config = get_config()
        self.min_landmarks = (
            min_landmarks if min_landmarks is not None
            else int(config.get('analysis.min_landmarks', 400))
        )
        self.min_face_scale = (
            min_face_scale if min_face_scale is not None
            else float(config.get('analysis.min_face_scale', 10.0))
        )
        self.geo = GeometryCalculator

    def analyze(self, landmarks: Optional[Sequence[Landmark]], *aux_landmarks: Optional[Sequence[Landmark]]):
        """
        분석 실행

        Args:
            landmarks: 주 포즈(정면 무표정) 랜드마크
            *aux_landmarks: 보조 포즈 랜드마크 (분석기별로 smile/down 등)

        Returns:
            분석기별 결과 객체 (입력 불량 시 기본 결과)
        """
        if not self.is_usable(landmarks):
            count = 0 if landmarks is None else len(landmarks)
            logger.debug(f"[{self.name}] unusable landmark set ({count} points), using default result")
            return self.default_result()

        face_h = self.geo.face_scale(landmarks, use_3d=self.use_3d_scale)
        if not math.isfinite(face_h) or face_h < self.min_face_scale:
            logger.debug(f"[{self.name}] degenerate face scale {face_h:.2f}, using default result")
            return self.default_result()

        return self._analyze(landmarks, face_h, *aux_landmarks)

    def is_usable(self, landmarks: Optional[Sequence[Landmark]]) -> bool:
        """랜드마크 세트 유효성"""
        return self.geo.is_usable(landmarks, self.min_landmarks)

    def default_result(self):
        raise NotImplementedError

    def _analyze(self, landmarks: List[Landmark], face_h: float, *aux_landmarks):
        raise NotImplementedError
