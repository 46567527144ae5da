"""
볼 처짐 / 볼륨 감소 분석
정면 무표정 vs 미소 vs 아래 보기 사진 비교
"""

from typing import List, Optional, Sequence

from ..models.analysis_models import CheekResult
from ..models.landmark_models import Landmark
from ..utils import get_logger
from .base_analyzer import BaseFeatureAnalyzer
from .constants import CHEEK_REGIONS, FACE_LANDMARKS
from .severity import get_severity

logger = get_logger(__name__)


class CheekAnalyzer(BaseFeatureAnalyzer):
    """볼 처짐 분석기"""

    name = 'cheek'

    def __init__(
        self,
        young_cheek_position: float = 0.50,   # 이 위치 이하면 처짐 없음
        sag_range: float = 0.22,              # 0점이 되는 추가 하강 폭
        good_smile_lift: float = 0.07,        # 미소 시 정상 상승량 (얼굴 높이 비율)
        max_gravity_drop: float = 0.10,       # 0점이 되는 아래 보기 하강량
        **kwargs
    ):
        super().__init__(**kwargs)
        self.young_cheek_position = young_cheek_position
        self.sag_range = sag_range
        self.good_smile_lift = good_smile_lift
        self.max_gravity_drop = max_gravity_drop

    def default_result(self) -> CheekResult:
        return CheekResult(
            score=70, sag_score=70, elasticity_score=70, gravity_sag_score=70,
            cheek_position=0.57, severity=get_severity('cheek', 70),
        )

    def _lower_cheek_y(self, landmarks) -> tuple:
        """좌/우 하부 볼 평균 y"""
        return (
            self.geo.region_mean_y(landmarks, CHEEK_REGIONS['left_lower']),
            self.geo.region_mean_y(landmarks, CHEEK_REGIONS['right_lower']),
        )

    def _analyze(
        self,
        neutral: List[Landmark],
        face_h: float,
        smile: Optional[Sequence[Landmark]] = None,
        down: Optional[Sequence[Landmark]] = None,
    ) -> CheekResult:
        geo = self.geo
        forehead = geo.get_point(neutral, FACE_LANDMARKS['forehead'])

        # 1. 볼 세로 위치 (0=이마, 1=턱). 젊은 볼 ~0.55, 처진 볼 ~0.62-0.70
        l_y, r_y = self._lower_cheek_y(neutral)
        cheek_y_norm = ((l_y + r_y) / 2 - forehead.y) / face_h
        sag_score = geo.clamp(100 - ((cheek_y_norm - self.young_cheek_position) / self.sag_range) * 100, 0, 100)

        # 2. 탄력: 미소 시 볼이 얼마나 올라가는지
        elasticity_score = 75.0
        if self.is_usable(smile):
            ls_y, rs_y = self._lower_cheek_y(smile)
            avg_lift = ((l_y - ls_y) / face_h + (r_y - rs_y) / face_h) / 2
            elasticity_score = geo.clamp((avg_lift / self.good_smile_lift) * 100, 0, 100)

        # 3. 중력 처짐: 아래를 볼 때 더 내려가는지
        gravity_sag_score = 75.0
        if self.is_usable(down):
            ld_y, rd_y = self._lower_cheek_y(down)
            avg_drop = ((ld_y - l_y) / face_h + (rd_y - r_y) / face_h) / 2
            gravity_sag_score = geo.clamp(100 - (avg_drop / self.max_gravity_drop) * 100, 0, 100)

        score = sag_score * 0.4 + elasticity_score * 0.35 + gravity_sag_score * 0.25

        logger.debug(f"[cheek] position={cheek_y_norm:.3f} score={score:.1f}")

        return CheekResult(
            score=geo.round_half_up(score),
            sag_score=geo.round_half_up(sag_score),
            elasticity_score=geo.round_half_up(elasticity_score),
            gravity_sag_score=geo.round_half_up(gravity_sag_score),
            cheek_position=cheek_y_norm,
            severity=get_severity('cheek', score),
        )
