"""
눈가 / 눈 주변 주름 분석

z 좌표 표면 변동을 주름 깊이의 대리 지표로 사용한다.
- 눈꼬리 주름 (crow's feet)
- 눈 밑
- 미소 시 눈꼬리 주름
- 미간 주름 (z 분산 + 눈썹 높이 비대칭)
- 눈꺼풀 처짐 (눈 개폐 비율)
"""

from typing import Dict, List, Optional, Sequence

from ..models.analysis_models import WrinkleResult
from ..models.landmark_models import Landmark
from ..utils import get_logger
from .base_analyzer import BaseFeatureAnalyzer
from .constants import EYE_REGIONS, EYELID_LANDMARKS
from .severity import get_severity

logger = get_logger(__name__)


class WrinkleAnalyzer(BaseFeatureAnalyzer):
    """눈가 주름 분석기"""

    name = 'wrinkle'

    DEFAULT_WEIGHTS = {
        'crow_feet': 0.35,
        'under_eye': 0.20,
        'smile': 0.15,
        'glabellar': 0.20,
        'eyelid': 0.10,
    }

    def __init__(
        self,
        crow_feet_variance: float = 0.0008,   # 정규화 z 분산 기준 (이 값에서 0점)
        under_eye_variance: float = 0.0010,   # 매끈 ~0.0001, 보통 ~0.0004, 깊은 주름 ~0.001+
        smile_variance: float = 0.0012,
        glabella_variance: float = 0.0006,
        brow_asymmetry: float = 0.04,
        eyelid_min_ratio: float = 0.12,       # 눈 개폐 비율 (세로/가로): 0.12 이하 0점
        eyelid_ratio_range: float = 0.18,     # 0.30 이상 100점
        weights: Optional[Dict[str, float]] = None,
        **kwargs
    ):
        super().__init__(**kwargs)
        self.crow_feet_variance = crow_feet_variance
        self.under_eye_variance = under_eye_variance
        self.smile_variance = smile_variance
        self.glabella_variance = glabella_variance
        self.brow_asymmetry = brow_asymmetry
        self.eyelid_min_ratio = eyelid_min_ratio
        self.eyelid_ratio_range = eyelid_ratio_range
        self.weights = dict(weights or self.DEFAULT_WEIGHTS)
        if set(self.weights) != set(self.DEFAULT_WEIGHTS) or abs(sum(self.weights.values()) - 1.0) > 1e-6:
            raise ValueError(f"Wrinkle weights must cover {sorted(self.DEFAULT_WEIGHTS)} and sum to 1.0")

    def default_result(self) -> WrinkleResult:
        return WrinkleResult(
            score=72, crow_feet_score=72, under_eye_score=72, smile_wrinkle_score=72,
            glabellar_score=72, eyelid_score=72, left_score=72, right_score=72,
            severity=get_severity('wrinkle', 72),
        )

    def _variance_score(self, variance: float, face_h: float, limit: float) -> float:
        """z 분산 → 점수 (얼굴 높이² 정규화, 낮을수록 매끈)"""
        return self.geo.clamp(100 - (variance / (face_h * face_h) / limit) * 100, 0, 100)

    def _region_variance(self, landmarks, region: str) -> float:
        return self.geo.variance(self.geo.region_z(landmarks, EYE_REGIONS[region]))

    def _glabellar_score(self, landmarks, face_h: float) -> float:
        """미간: z 분산 70% + 눈썹 높이 비대칭 30%"""
        geo = self.geo
        z_score = self._variance_score(self._region_variance(landmarks, 'glabella'), face_h, self.glabella_variance)

        left_top = geo.get_point(landmarks, EYELID_LANDMARKS['left_eye']['top'])
        right_top = geo.get_point(landmarks, EYELID_LANDMARKS['right_eye']['top'])
        left_h = geo.region_mean_y(landmarks, EYE_REGIONS['left_brow']) - left_top.y
        right_h = geo.region_mean_y(landmarks, EYE_REGIONS['right_brow']) - right_top.y
        asymmetry = abs(left_h - right_h) / face_h
        asym_score = geo.clamp(100 - (asymmetry / self.brow_asymmetry) * 100, 0, 100)

        return geo.clamp(z_score * 0.7 + asym_score * 0.3, 0, 100)

    def _eyelid_score(self, landmarks) -> float:
        """양쪽 눈 평균 개폐 비율 (세로 / 가로)"""
        geo = self.geo
        ratios = []
        for eye in EYELID_LANDMARKS.values():
            width = abs(geo.get_point(landmarks, eye['inner']).x - geo.get_point(landmarks, eye['outer']).x)
            height = abs(geo.get_point(landmarks, eye['top']).y - geo.get_point(landmarks, eye['bottom']).y)
            ratios.append(height / width if width > 0 else 0.0)
        ratio = geo.mean(ratios)
        return geo.clamp((ratio - self.eyelid_min_ratio) / self.eyelid_ratio_range * 100, 0, 100)

    def _analyze(
        self,
        neutral: List[Landmark],
        face_h: float,
        smile: Optional[Sequence[Landmark]] = None,
    ) -> WrinkleResult:
        geo = self.geo

        # 1. 눈꼬리 주름
        l_var = self._region_variance(neutral, 'left_crow')
        r_var = self._region_variance(neutral, 'right_crow')
        crow_feet_score = self._variance_score((l_var + r_var) / 2, face_h, self.crow_feet_variance)

        # 2. 눈 밑
        under_var = (self._region_variance(neutral, 'left_under_eye') + self._region_variance(neutral, 'right_under_eye')) / 2
        under_eye_score = self._variance_score(under_var, face_h, self.under_eye_variance)

        # 3. 미소 시 눈꼬리 주름이 생기는지
        smile_wrinkle_score = 75.0
        if self.is_usable(smile):
            smile_var = (self._region_variance(smile, 'left_crow') + self._region_variance(smile, 'right_crow')) / 2
            smile_wrinkle_score = self._variance_score(smile_var, face_h, self.smile_variance)

        # 4. 미간, 5. 눈꺼풀
        glabellar_score = self._glabellar_score(neutral, face_h)
        eyelid_score = self._eyelid_score(neutral)

        w = self.weights
        score = (
            crow_feet_score * w['crow_feet']
            + under_eye_score * w['under_eye']
            + smile_wrinkle_score * w['smile']
            + glabellar_score * w['glabellar']
            + eyelid_score * w['eyelid']
        )

        logger.debug(
            f"[wrinkle] crow={crow_feet_score:.1f} under={under_eye_score:.1f} "
            f"smile={smile_wrinkle_score:.1f} glabellar={glabellar_score:.1f} eyelid={eyelid_score:.1f}"
        )

        return WrinkleResult(
            score=geo.round_half_up(score),
            crow_feet_score=geo.round_half_up(crow_feet_score),
            under_eye_score=geo.round_half_up(under_eye_score),
            smile_wrinkle_score=geo.round_half_up(smile_wrinkle_score),
            glabellar_score=geo.round_half_up(glabellar_score),
            eyelid_score=geo.round_half_up(eyelid_score),
            left_score=geo.round_half_up(self._variance_score(l_var, face_h, self.crow_feet_variance)),
            right_score=geo.round_half_up(self._variance_score(r_var, face_h, self.crow_feet_variance)),
            severity=get_severity('wrinkle', score),
        )
