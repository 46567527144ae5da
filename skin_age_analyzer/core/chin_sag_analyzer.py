"""
턱 / 턱선 처짐 분석
정면 + 아래 보기(bottom) 사진 사용. bottom 사진은 중력에 의한 처짐과 이중턱을 드러낸다.
"""

from typing import List, Optional, Sequence

from ..models.analysis_models import ChinSagResult
from ..models.landmark_models import Landmark
from ..utils import get_logger
from .base_analyzer import BaseFeatureAnalyzer
from .constants import CHIN_JAW_WIDTH_POINTS, CHIN_REGIONS
from .severity import chin_future, get_severity

logger = get_logger(__name__)


class ChinSagAnalyzer(BaseFeatureAnalyzer):
    """턱 처짐 분석기"""

    name = 'chin'
    use_3d_scale = True

    def __init__(
        self,
        sharp_jaw_ratio: float = 0.50,        # 이 비율 이하면 날렵한 턱
        sharp_contour_variance: float = 0.0015,  # 날렵한 턱선의 z 분산
        max_sag_diff: float = 0.15,           # 0점이 되는 bottom-neutral 턱 비율 차
        **kwargs
    ):
        super().__init__(**kwargs)
        self.sharp_jaw_ratio = sharp_jaw_ratio
        self.sharp_contour_variance = sharp_contour_variance
        self.max_sag_diff = max_sag_diff

    def default_result(self) -> ChinSagResult:
        return ChinSagResult(
            score=65, jaw_sharp_score=65, contour_score=65, gravity_score=65,
            jaw_ratio=None, severity=get_severity('chin', 65), future=chin_future(65),
        )

    def _jaw_ratio(self, landmarks, face_h: float) -> float:
        """턱 너비(2D) / 얼굴 높이(3D)"""
        left_idx, right_idx = CHIN_JAW_WIDTH_POINTS
        jaw_w = self.geo.distance_2d(self.geo.get_point(landmarks, left_idx), self.geo.get_point(landmarks, right_idx))
        return jaw_w / face_h

    def _analyze(
        self,
        neutral: List[Landmark],
        face_h: float,
        bottom: Optional[Sequence[Landmark]] = None,
    ) -> ChinSagResult:
        geo = self.geo

        # 1. 턱 날렵함 (40%): 처지면 얼굴 높이 대비 턱 아래가 넓어짐
        jaw_ratio = self._jaw_ratio(neutral, face_h)
        jaw_sharp_score = geo.clamp(100 - max(0.0, jaw_ratio - self.sharp_jaw_ratio) / 0.30 * 80, 0, 100)

        # 2. 턱선 z 윤곽 (30%): 날렵하면 z 분산 큼, 처지면 평평
        jaw_z = geo.region_z(neutral, CHIN_REGIONS['jaw_left'] + CHIN_REGIONS['jaw_right'])
        z_var = geo.variance(jaw_z)
        contour_score = geo.clamp(z_var / self.sharp_contour_variance * 100, 0, 100)

        # 3. 중력 처짐 (30%): bottom 사진에서 턱이 더 넓어 보이면 처짐
        gravity_score = 65.0
        if self.is_usable(bottom):
            bottom_h = geo.face_scale(bottom, use_3d=True) or 1.0
            sag_diff = self._jaw_ratio(bottom, bottom_h) - jaw_ratio
            gravity_score = geo.clamp(100 - max(0.0, sag_diff) / self.max_sag_diff * 100, 0, 100)

        combined = jaw_sharp_score * 0.40 + contour_score * 0.30 + gravity_score * 0.30
        score = int(geo.clamp(geo.round_half_up(combined), 0, 100))

        logger.debug(f"[chin] jaw_ratio={jaw_ratio:.3f} z_var={z_var:.6f} score={score}")

        return ChinSagResult(
            score=score,
            jaw_sharp_score=geo.round_half_up(jaw_sharp_score),
            contour_score=geo.round_half_up(contour_score),
            gravity_score=geo.round_half_up(gravity_score),
            jaw_ratio=geo.round_half_up(jaw_ratio * 100) / 100,
            severity=get_severity('chin', score),
            future=chin_future(score),
        )
