"""
팔자주름(nasolabial fold) 깊이 / 길이 분석
점수가 높을수록 얕고 짧은 주름 (젊음)
"""

from typing import List

from ..models.analysis_models import NasolabialResult
from ..models.landmark_models import Landmark
from ..utils import get_logger
from .base_analyzer import BaseFeatureAnalyzer
from .constants import NASOLABIAL_LANDMARKS
from .severity import get_severity

logger = get_logger(__name__)


class NasolabialAnalyzer(BaseFeatureAnalyzer):
    """팔자주름 분석기 (단일 포즈)"""

    name = 'nasolabial'

    def __init__(
        self,
        length_offset: float = 0.17,   # 정규화 길이 기준 (젊음 ~0.20, 중년 ~0.24, 노년 ~0.28)
        length_range: float = 0.14,
        max_depth: float = 0.06,       # 0점이 되는 정규화 깊이
        **kwargs
    ):
        super().__init__(**kwargs)
        self.length_offset = length_offset
        self.length_range = length_range
        self.max_depth = max_depth

    def default_result(self) -> NasolabialResult:
        return NasolabialResult(
            score=65, length_score=65, depth_score=65, left_score=65, right_score=65,
            asymmetry=5, normalized_length=0.23, normalized_depth=0.02,
            severity=get_severity('nasolabial', 65),
        )

    def _length_score(self, normalized_length: float) -> float:
        return self.geo.clamp(100 - ((normalized_length - self.length_offset) / self.length_range) * 100, 0, 100)

    def _side(self, landmarks, side: str, face_h: float):
        """한쪽 주름의 (정규화 길이, z 깊이)"""
        geo = self.geo
        points = NASOLABIAL_LANDMARKS[side]
        length = geo.distance_2d(
            geo.get_point(landmarks, points['nostril']), geo.get_point(landmarks, points['mouth'])
        ) / face_h
        cheek_z = geo.mean(geo.region_z(landmarks, points['cheek_ref']))
        depth = abs(geo.get_point(landmarks, points['fold_mid']).z - cheek_z)
        return length, depth

    def _analyze(self, landmarks: List[Landmark], face_h: float, *unused) -> NasolabialResult:
        geo = self.geo

        # 주름 길이 (콧방울 ~ 입꼬리)와 볼 표면 대비 z 깊이
        right_len, right_depth = self._side(landmarks, 'right', face_h)
        left_len, left_depth = self._side(landmarks, 'left', face_h)
        avg_len = (right_len + left_len) / 2
        norm_depth = ((right_depth + left_depth) / 2) / face_h

        length_score = self._length_score(avg_len)
        depth_score = geo.clamp(100 - (norm_depth / self.max_depth) * 100, 0, 100)

        score = length_score * 0.5 + depth_score * 0.5
        asymmetry = abs(right_len - left_len) / avg_len if avg_len > 0 else 0.0

        logger.debug(f"[nasolabial] length={avg_len:.3f} depth={norm_depth:.4f} score={score:.1f}")

        return NasolabialResult(
            score=geo.round_half_up(score),
            length_score=geo.round_half_up(length_score),
            depth_score=geo.round_half_up(depth_score),
            left_score=geo.round_half_up(self._length_score(left_len)),
            right_score=geo.round_half_up(self._length_score(right_len)),
            asymmetry=geo.round_half_up(asymmetry * 100),
            normalized_length=avg_len,
            normalized_depth=norm_depth,
            severity=get_severity('nasolabial', score),
        )
