"""
부위별 점수를 종합해 피부 나이 추정

- 가중치 테이블(standard / basic) 선택
- 성별 가중치 보정
- 총점 → 나이 구간 / 등급
- 실제 나이 대비 비교
- 11개 부위 표시 항목 생성
"""

import math
from typing import Any, Callable, Dict, List, Optional

from ..models.analysis_models import (
    AgeRange,
    BoneStructureResult,
    CheekResult,
    ChinSagResult,
    FeatureEntry,
    Grade,
    MarionetteResult,
    NasolabialResult,
    RelativeAge,
    SkinAgeResult,
    UserProfile,
    WrinkleResult,
)
from ..utils import get_config, get_logger
from .bone_structure_analyzer import BoneStructureAnalyzer
from .cheek_analyzer import CheekAnalyzer
from .chin_sag_analyzer import ChinSagAnalyzer
from .constants import (
    AGE_RANGE_TABLE,
    GENDER_WEIGHT_ADJUSTMENTS,
    GRADE_TABLE,
    RELATIVE_AGE_TOLERANCE,
    WEIGHT_TABLES,
)
from .geometry import GeometryCalculator
from .marionette_analyzer import MarionetteAnalyzer
from .nasolabial_analyzer import NasolabialAnalyzer
from .severity import get_severity
from .wrinkle_analyzer import WrinkleAnalyzer

logger = get_logger(__name__)

# 가중치 factor → 분석 결과에서 점수 꺼내기
FACTOR_EXTRACTORS: Dict[str, Callable[[Dict[str, Any]], float]] = {
    'nasolabial': lambda r: r['nasolabial'].score,
    'marionette': lambda r: r['marionette'].score,
    'chin': lambda r: r['chin'].score,
    'cheek': lambda r: r['cheek'].sag_score,
    'crowFeet': lambda r: r['wrinkle'].crow_feet_score,
    'glabellar': lambda r: r['wrinkle'].glabellar_score,
    'eyelid': lambda r: r['wrinkle'].eyelid_score,
    'bone': lambda r: r['bone'].score,
    'elasticity': lambda r: r['cheek'].elasticity_score,
    'underEye': lambda r: r['wrinkle'].under_eye_score,
    'smile': lambda r: r['wrinkle'].smile_wrinkle_score,
}

# basic 테이블은 분석기 총점을 그대로 사용
BASIC_EXTRACTORS: Dict[str, Callable[[Dict[str, Any]], float]] = {
    'nasolabial': lambda r: r['nasolabial'].score,
    'cheek': lambda r: r['cheek'].score,
    'wrinkle': lambda r: r['wrinkle'].score,
    'bone': lambda r: r['bone'].score,
}


class WeightTable:
    """
    이름 있는 가중치 전략

    Attributes:
        name: 테이블 이름
        weights: factor → 가중치 (합계 1.0)
        gender_adjustments: 성별 → factor별 가중치 증감
        extractors: factor → 점수 추출 함수
    """

    def __init__(
        self,
        name: str,
        weights: Dict[str, float],
        extractors: Dict[str, Callable[[Dict[str, Any]], float]],
        gender_adjustments: Optional[Dict[str, Dict[str, float]]] = None,
    ):
        missing = set(weights) - set(extractors)
        if missing:
            raise ValueError(f"Weight table '{name}' has factors without extractor: {sorted(missing)}")
        self.name = name
        self.weights = dict(weights)
        self.extractors = extractors
        self.gender_adjustments = gender_adjustments or {}
        self._check_sum(self.weights)
        for adjusted in (self.weights_for(g) for g in self.gender_adjustments):
            self._check_sum(adjusted)

    def _check_sum(self, weights: Dict[str, float]):
        total = sum(weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Weight table '{self.name}' sums to {total}, expected 1.0")

    def weights_for(self, gender: Optional[str] = None) -> Dict[str, float]:
        """성별 보정이 적용된 가중치 (보정 없으면 기본값 복사본)"""
        weights = dict(self.weights)
        for factor, delta in self.gender_adjustments.get(gender, {}).items():
            weights[factor] += delta
        return weights

    def weighted_total(self, records: Dict[str, Any], gender: Optional[str] = None) -> float:
        """가중 합계 (반올림 전)"""
        weights = self.weights_for(gender)
        return sum(self.extractors[factor](records) * w for factor, w in weights.items())

    def __repr__(self):
        return f"WeightTable(name={self.name}, factors={len(self.weights)})"


WEIGHT_TABLE_REGISTRY: Dict[str, WeightTable] = {
    'standard': WeightTable(
        'standard', WEIGHT_TABLES['standard'], FACTOR_EXTRACTORS,
        GENDER_WEIGHT_ADJUSTMENTS['standard'],
    ),
    'basic': WeightTable(
        'basic', WEIGHT_TABLES['basic'], BASIC_EXTRACTORS,
        GENDER_WEIGHT_ADJUSTMENTS['basic'],
    ),
}


def get_weight_table(name: str) -> WeightTable:
    """이름으로 가중치 테이블 조회"""
    try:
        return WEIGHT_TABLE_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown weight table '{name}', expected one of {sorted(WEIGHT_TABLE_REGISTRY)}"
        ) from None


def score_to_age_range(score: float) -> AgeRange:
    """총점 → 피부 나이 구간"""
    for threshold, age_min, age_max in AGE_RANGE_TABLE:
        if score >= threshold:
            return AgeRange(age_min, age_max)
    _, age_min, age_max = AGE_RANGE_TABLE[-1]
    return AgeRange(age_min, age_max)


def score_to_grade(score: float) -> Grade:
    """총점 → 등급"""
    for threshold, label, text, color in GRADE_TABLE:
        if score >= threshold:
            return Grade(label, text, color)
    _, label, text, color = GRADE_TABLE[-1]
    return Grade(label, text, color)


def compare_age(age_range: AgeRange, profile: Optional[UserProfile]) -> Optional[RelativeAge]:
    """
    실제 나이와 추정 나이 구간 중간값 비교

    diff > 0: 실제 나이가 더 많음 (젊어 보임)
    """
    if profile is None or profile.age_value is None:
        return None

    geo = GeometryCalculator
    diff = geo.round_half_up(profile.age_value - age_range.midpoint)
    if diff > RELATIVE_AGE_TOLERANCE:
        verdict = 'younger'
    elif diff < -RELATIVE_AGE_TOLERANCE:
        verdict = 'older'
    else:
        verdict = 'about_right'

    return RelativeAge(
        diff=diff,
        age_midpoint=geo.round_half_up(age_range.midpoint),
        age_value=profile.age_value,
        age_label=profile.age_label,
        verdict=verdict,
    )


class SkinAgeScorer:
    """종합 피부 나이 계산기"""

    def __init__(self, weight_table: Optional[str] = None):
        """
        Args:
            weight_table: 'standard' 또는 'basic' (None이면 config의 scoring.weight_table)
        """
        if weight_table is None:
            weight_table = get_config().get('scoring.weight_table', 'standard')
        self.table = get_weight_table(weight_table)

    def calculate(
        self,
        nasolabial: Optional[NasolabialResult],
        cheek: Optional[CheekResult],
        wrinkle: Optional[WrinkleResult],
        bone: Optional[BoneStructureResult],
        marionette: Optional[MarionetteResult] = None,
        chin: Optional[ChinSagResult] = None,
        profile: Optional[UserProfile] = None,
    ) -> SkinAgeResult:
        """
        부위별 결과를 종합

        누락된 결과(None)는 각 분석기의 기본 결과로 대체한다.

        Returns:
            SkinAgeResult
        """
        records = {
            'nasolabial': nasolabial or NasolabialAnalyzer().default_result(),
            'cheek': cheek or CheekAnalyzer().default_result(),
            'wrinkle': wrinkle or WrinkleAnalyzer().default_result(),
            'bone': bone or BoneStructureAnalyzer().default_result(),
            'marionette': marionette or MarionetteAnalyzer().default_result(),
            'chin': chin or ChinSagAnalyzer().default_result(),
        }

        gender = profile.gender if profile else None
        weighted = self.table.weighted_total(records, gender)
        total_score = int(GeometryCalculator.clamp(GeometryCalculator.round_half_up(weighted), 0, 100))

        age_range = score_to_age_range(total_score)
        bone_factor = records['bone'].bone_factor

        logger.info(
            f"Skin age score: {total_score} ({self.table.name} table, gender={gender}) "
            f"→ age {age_range.min}-{age_range.max}"
        )

        return SkinAgeResult(
            total_score=total_score,
            age_range=age_range,
            grade=score_to_grade(total_score),
            bone_factor=bone_factor,
            skin_factor=100 - bone_factor,
            features=self._build_features(records),
            relative_age=compare_age(age_range, profile),
            weight_table=self.table.name,
            raw_data=records,
        )

    @staticmethod
    def _build_features(records: Dict[str, Any]) -> List[FeatureEntry]:
        """11개 부위 표시 항목 (얼굴 위 → 아래 순서)"""
        wrinkle = records['wrinkle']
        cheek = records['cheek']
        nasolabial = records['nasolabial']
        marionette = records['marionette']
        chin = records['chin']
        bone = records['bone']

        return [
            # 상안면
            FeatureEntry('glabellar', 'Glabellar lines', '🧐', wrinkle.glabellar_score,
                         get_severity('glabellar', wrinkle.glabellar_score), 92, 8),
            FeatureEntry('eyelid', 'Eyelid droop', '👁️', wrinkle.eyelid_score,
                         get_severity('eyelid', wrinkle.eyelid_score), 70, 30),
            FeatureEntry('crowFeet', "Crow's feet", '🌟', wrinkle.crow_feet_score,
                         get_severity('generic', wrinkle.crow_feet_score), 85, 15),
            FeatureEntry('underEye', 'Under-eye', '✨', wrinkle.under_eye_score,
                         get_severity('under_eye', wrinkle.under_eye_score), 80, 20),
            # 중안면
            FeatureEntry('nasolabial', 'Nasolabial folds', '👄', nasolabial.score,
                         nasolabial.severity, 75, 25),
            FeatureEntry('cheekSag', 'Cheek sagging', '💫', cheek.sag_score,
                         get_severity('generic', cheek.sag_score), 70, 30),
            FeatureEntry('elasticity', 'Skin elasticity', '🌸', cheek.elasticity_score,
                         get_severity('elasticity', cheek.elasticity_score), 90, 10),
            FeatureEntry('smileWrinkle', 'Smile lines', '😊', wrinkle.smile_wrinkle_score,
                         get_severity('generic', wrinkle.smile_wrinkle_score), 90, 10),
            # 하안면
            FeatureEntry('marionette', 'Marionette lines', '🎤', marionette.score,
                         marionette.severity, marionette.skin_contrib, marionette.bone_contrib),
            FeatureEntry('chin', 'Chin sagging', '🪴', chin.score,
                         chin.severity, 65, 35, future=chin.future),
            FeatureEntry('jawLine', 'Face line', '🔷', bone.jaw_score,
                         get_severity('jaw', bone.jaw_score), 55, 45),
        ]
