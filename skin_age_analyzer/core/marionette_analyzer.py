"""
마리오네트 라인 분석
입꼬리에서 턱 방향으로 내려가는 주름. 볼살(jowl) 하강량 + z 분산 + 중력 테스트.
"""

from typing import List, Optional, Sequence

from ..models.analysis_models import MarionetteResult
from ..models.landmark_models import Landmark
from ..utils import get_logger
from .base_analyzer import BaseFeatureAnalyzer
from .constants import FACE_LANDMARKS, JOWL_REGIONS
from .severity import get_severity

logger = get_logger(__name__)


class MarionetteAnalyzer(BaseFeatureAnalyzer):
    """마리오네트 라인 분석기"""

    name = 'marionette'

    def __init__(
        self,
        drop_offset: float = 0.07,           # 이 이하의 하강은 정상
        smooth_variance: float = 0.0007,     # 0점이 되는 정규화 z 분산
        **kwargs
    ):
        super().__init__(**kwargs)
        self.drop_offset = drop_offset
        self.smooth_variance = smooth_variance

    def default_result(self) -> MarionetteResult:
        return MarionetteResult(
            score=68, sag_score=68, depth_score=68, gravity_score=68,
            severity=get_severity('marionette', 68),
        )

    def _jowl_drop(self, landmarks, face_h: float) -> float:
        """입꼬리 대비 볼살 평균 하강량 (얼굴 높이 정규화, 좌우 평균)"""
        geo = self.geo
        mouth_l = geo.get_point(landmarks, FACE_LANDMARKS['left_mouth'])
        mouth_r = geo.get_point(landmarks, FACE_LANDMARKS['right_mouth'])
        l_drop = (geo.region_mean_y(landmarks, JOWL_REGIONS['left']) - mouth_l.y) / face_h
        r_drop = (geo.region_mean_y(landmarks, JOWL_REGIONS['right']) - mouth_r.y) / face_h
        return (l_drop + r_drop) / 2

    def _analyze(
        self,
        neutral: List[Landmark],
        face_h: float,
        down: Optional[Sequence[Landmark]] = None,
    ) -> MarionetteResult:
        geo = self.geo

        # 1. 볼살 처짐 (drop < 0.07 양호, > 0.19 깊은 라인)
        drop_avg = self._jowl_drop(neutral, face_h)
        sag_score = geo.clamp(100 - max(0.0, drop_avg - self.drop_offset) / 0.12 * 100, 0, 100)

        # 2. 볼살 영역 z 분산 (홈 깊이)
        l_var = geo.variance(geo.region_z(neutral, JOWL_REGIONS['left']))
        r_var = geo.variance(geo.region_z(neutral, JOWL_REGIONS['right']))
        norm_var = ((l_var + r_var) / 2) / (face_h * face_h)
        depth_score = geo.clamp(100 - (norm_var / self.smooth_variance) * 100, 0, 100)

        # 3. 중력 테스트: 아래를 볼 때 더 내려가는지
        gravity_score = 75.0
        if self.is_usable(down):
            drop_down = self._jowl_drop(down, face_h)
            gravity_score = geo.clamp(100 - max(0.0, drop_down - self.drop_offset) / 0.15 * 100, 0, 100)

        score = geo.round_half_up(sag_score * 0.45 + depth_score * 0.35 + gravity_score * 0.20)

        logger.debug(f"[marionette] drop={drop_avg:.3f} norm_var={norm_var:.6f} score={score}")

        return MarionetteResult(
            score=score,
            sag_score=geo.round_half_up(sag_score),
            depth_score=geo.round_half_up(depth_score),
            gravity_score=geo.round_half_up(gravity_score),
            severity=get_severity('marionette', score),
        )
