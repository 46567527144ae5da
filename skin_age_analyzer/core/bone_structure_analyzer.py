"""
골격 구조 분석
얼굴 비율, 턱 너비, 광대 돌출, 포즈 간 골격 안정성을 평가하고
골격 요인 / 피부 요인 비율을 계산한다.
"""

from typing import List, Optional, Sequence

from ..models.analysis_models import BoneStructureResult
from ..models.landmark_models import Landmark
from ..utils import get_logger
from .base_analyzer import BaseFeatureAnalyzer
from .constants import FACE_LANDMARKS
from .severity import get_severity

logger = get_logger(__name__)


class BoneStructureAnalyzer(BaseFeatureAnalyzer):
    """골격 구조 분석기"""

    name = 'bone'

    def __init__(
        self,
        golden_ratio: float = 1.6,        # 이상적인 얼굴 세로/가로 비율
        ideal_jaw_ratio: float = 0.70,    # 이상적인 턱 너비 / 얼굴 너비
        **kwargs
    ):
        super().__init__(**kwargs)
        self.golden_ratio = golden_ratio
        self.ideal_jaw_ratio = ideal_jaw_ratio

    def default_result(self) -> BoneStructureResult:
        return BoneStructureResult(
            score=72, ratio_score=72, jaw_score=68, cheek_score=75, stability_score=75,
            bone_factor=25, skin_factor=75, face_ratio=1.58, jaw_ratio=0.68,
            severity=get_severity('bone', 72),
        )

    def _analyze(
        self,
        neutral: List[Landmark],
        face_h: float,
        smile: Optional[Sequence[Landmark]] = None,
        down: Optional[Sequence[Landmark]] = None,
    ) -> BoneStructureResult:
        geo = self.geo
        lm = FACE_LANDMARKS

        face_w = geo.distance_2d(geo.get_point(neutral, lm['left_ear']), geo.get_point(neutral, lm['right_ear']))

        # 1. 얼굴 비율 (황금비 기준)
        ratio = face_h / face_w if face_w > 0 else 0.0
        ratio_score = geo.clamp(100 - abs(ratio - self.golden_ratio) * 80, 40, 100)

        # 2. 턱선 너비
        jaw_w = geo.distance_2d(geo.get_point(neutral, lm['left_jaw']), geo.get_point(neutral, lm['right_jaw']))
        jaw_ratio = jaw_w / face_w if face_w > 0 else 0.0
        jaw_score = geo.clamp(100 - abs(jaw_ratio - self.ideal_jaw_ratio) * 200, 30, 100)

        # 3. 광대 돌출 (턱 너비 대비, 1.1 이상이면 높은 광대)
        cheek_w = geo.distance_2d(
            geo.get_point(neutral, lm['left_cheekbone']), geo.get_point(neutral, lm['right_cheekbone'])
        )
        cheek_jaw_ratio = cheek_w / jaw_w if jaw_w > 0 else 0.0
        cheek_score = geo.clamp((cheek_jaw_ratio - 0.85) / 0.35 * 100, 30, 100)

        # 4. 포즈 간 골격 안정성 (뼈는 표정/자세에 따라 변하지 않음)
        stability_score = self._stability_score(neutral, smile, down)

        structure_score = ratio_score * 0.3 + jaw_score * 0.3 + cheek_score * 0.2 + stability_score * 0.2

        # 골격 요인: 전체 노화 인상 중 바꿀 수 없는 부분 (15~40%)
        bone_factor = geo.round_half_up(geo.clamp(15 + (100 - structure_score) * 0.20, 15, 40))

        logger.debug(
            f"[bone] ratio={ratio:.3f} jaw_ratio={jaw_ratio:.3f} "
            f"cheek_jaw={cheek_jaw_ratio:.3f} structure={structure_score:.1f}"
        )

        return BoneStructureResult(
            score=geo.round_half_up(structure_score),
            ratio_score=geo.round_half_up(ratio_score),
            jaw_score=geo.round_half_up(jaw_score),
            cheek_score=geo.round_half_up(cheek_score),
            stability_score=geo.round_half_up(stability_score),
            bone_factor=bone_factor,
            skin_factor=100 - bone_factor,
            face_ratio=round(ratio, 2),
            jaw_ratio=round(jaw_ratio, 2),
            severity=get_severity('bone', structure_score),
        )

    def _stability_score(self, neutral, smile, down) -> float:
        """
        포즈 간 골격 거리(눈 사이, 턱 너비)의 상대 변동으로 안정성 점수 계산

        유효한 포즈가 하나뿐이면 75
        """
        geo = self.geo
        lm = FACE_LANDMARKS

        poses = [kp for kp in (neutral, smile, down) if self.is_usable(kp)]
        if len(poses) <= 1:
            return 75.0

        ipds = [
            geo.distance_2d(geo.get_point(kp, lm['left_eye_inner']), geo.get_point(kp, lm['right_eye_inner']))
            for kp in poses
        ]
        jaws = [
            geo.distance_2d(geo.get_point(kp, lm['left_jaw']), geo.get_point(kp, lm['right_jaw']))
            for kp in poses
        ]
        avg_var = (geo.relative_variance(ipds) + geo.relative_variance(jaws)) / 2
        return geo.clamp(100 - avg_var * 1000, 40, 100)
