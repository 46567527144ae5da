"""
분석 결과를 리포트 JSON으로 변환 / 랜드마크 세션 파일 로드
"""
import json
import os
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models.analysis_models import FeatureEntry, SkinAgeResult, UserProfile
from ..models.landmark_models import Pose, Session, landmarks_from_points
from .exceptions import LandmarkInputError


# 개선 제안 그룹 (부위 키 → 그룹)
FOLD_FEATURES = {'nasolabial'}
SAG_FEATURES = {'cheekSag', 'elasticity', 'marionette', 'chin'}
WRINKLE_FEATURES = {'crowFeet', 'glabellar', 'eyelid', 'underEye', 'smileWrinkle'}

BASE_HOME_CARE = ['Daily SPF50+ sunscreen', 'Moisturizer (morning and night)']

# 그룹별 (home, pro, medical) 항목
CARE_ITEMS = {
    'fold': (
        ['Facial massage along the fold', 'Retinol cream'],
        ['EMS facial', 'Radiofrequency lift'],
        ['Hyaluronic acid filler', 'Thread lift'],
    ),
    'sag': (
        ['Collagen and elastin supplements', 'Facial exercises'],
        ['HIFU', 'Ionic infusion'],
        ['Thermage', 'Surgical lift'],
    ),
    'wrinkle': (
        ['Eye cream (retinol, peptides)', 'Low-friction skincare'],
        ['Microneedling', 'LED light therapy'],
        ['Botox (crow\'s feet)', 'Fractional laser'],
    ),
}

TIER_INFO = [
    ('home', 'Home care', 'Results felt in 3-6 months'),
    ('pro', 'Professional care', 'Improvement in 1-3 months'),
    ('medical', 'Medical treatment', 'Effect within days to weeks'),
]


def _unique(items: List[str]) -> List[str]:
    """순서를 유지한 중복 제거"""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def build_improvement_tiers(features: Sequence[FeatureEntry], threshold: int = 75) -> List[Dict[str, Any]]:
    """
    점수가 낮은 부위에 대한 단계별 개선 제안

    Args:
        features: SkinAgeResult.features
        threshold: 이 점수 미만인 부위만 대상

    Returns:
        [{'key', 'label', 'timeline', 'items'}, ...] (대상 부위가 없으면 빈 리스트)
    """
    weak_keys = {f.key for f in features if f.score < threshold}
    if not weak_keys:
        return []

    groups = []
    if weak_keys & FOLD_FEATURES:
        groups.append('fold')
    if weak_keys & SAG_FEATURES:
        groups.append('sag')
    if weak_keys & WRINKLE_FEATURES:
        groups.append('wrinkle')

    tier_items = [list(BASE_HOME_CARE), [], []]
    for group in groups:
        for i, items in enumerate(CARE_ITEMS[group]):
            tier_items[i].extend(items)

    tiers = []
    for (key, label, timeline), items in zip(TIER_INFO, tier_items):
        if items:
            tiers.append({'key': key, 'label': label, 'timeline': timeline, 'items': _unique(items)})
    return tiers


def to_report_json(result: SkinAgeResult, threshold: int = 75, source: str = "") -> Dict[str, Any]:
    """
    분석 결과를 리포트 JSON 딕셔너리로 변환

    Args:
        result: SkinAgeScorer.calculate()의 결과
        threshold: 개선 제안 기준 점수
        source: 입력 파일 경로 (선택)

    Returns:
        dict: JSON 직렬화 가능한 딕셔너리
    """
    output = result.to_dict()
    output['improvements'] = build_improvement_tiers(result.features, threshold)
    output['timestamp'] = datetime.now().isoformat()
    output['source'] = source
    return output


def to_json_string(result: SkinAgeResult, threshold: int = 75, source: str = "") -> str:
    """리포트 JSON 문자열"""
    return json.dumps(to_report_json(result, threshold, source), indent=2, ensure_ascii=False)


def save_json(result: SkinAgeResult, output_path: str, threshold: int = 75, source: str = "") -> Dict[str, Any]:
    """
    리포트를 JSON 파일로 저장 (상위 폴더가 없으면 생성)

    Returns:
        저장된 딕셔너리
    """
    dir_path = os.path.dirname(output_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    json_data = to_report_json(result, threshold, source)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(json_data, f, indent=2, ensure_ascii=False)

    return json_data


def load_session_json(path: str) -> Tuple[Session, Optional[UserProfile]]:
    """
    랜드마크 세션 파일 로드

    형식:
        {"neutral": [[x, y, z], ...], "smile": [...], "down": [...],
         "profile": {"ageValue": 35, "gender": "female"}}

    neutral만 필수. 각 포인트는 [x, y, z] 리스트 또는 {"x", "y", "z"} 딕셔너리.

    Raises:
        LandmarkInputError: 파일이 없거나 형식이 잘못된 경우
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise LandmarkInputError(f"Session file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise LandmarkInputError(f"Invalid JSON in session file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LandmarkInputError(f"Session file root must be an object: {path}")
    if 'neutral' not in data:
        raise LandmarkInputError(f"Session file has no 'neutral' landmarks: {path}")

    session = Session()
    for pose in Pose:
        points = data.get(pose.value)
        if points is None:
            continue
        if not isinstance(points, list):
            raise LandmarkInputError(f"'{pose.value}' landmarks must be a list: {path}")
        try:
            session.add(pose, landmarks_from_points(points))
        except (TypeError, ValueError, KeyError, IndexError) as e:
            raise LandmarkInputError(f"Malformed '{pose.value}' landmarks in {path}: {e}") from e

    profile = data.get('profile')
    if profile is not None and not isinstance(profile, dict):
        raise LandmarkInputError(f"'profile' must be an object: {path}")
    try:
        user_profile = UserProfile.from_dict(profile)
    except (TypeError, ValueError) as e:
        raise LandmarkInputError(f"Malformed profile in {path}: {e}") from e

    return session, user_profile
