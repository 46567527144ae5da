"""분석 결과 데이터 모델 정의"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


@dataclass(frozen=True)
class Severity:
    """심각도 구간 (0: 양호 ~ 3: 심함)"""

    label: str
    color: str
    level: int

    def to_dict(self) -> Dict[str, Any]:
        return {'label': self.label, 'color': self.color, 'level': self.level}


@dataclass
class BoneStructureResult:
    """골격 구조 분석 결과"""

    score: int
    ratio_score: int           # 얼굴 세로/가로 비율 (황금비 1.6 기준)
    jaw_score: int             # 턱 너비 비율
    cheek_score: int           # 광대/턱 비율
    stability_score: int       # 포즈 간 골격 거리 안정성
    bone_factor: int           # 골격 요인 비율 (%)
    skin_factor: int           # 피부/연부조직 요인 비율 (%)
    face_ratio: float
    jaw_ratio: float
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'ratioScore': self.ratio_score,
            'jawScore': self.jaw_score,
            'cheekScore': self.cheek_score,
            'stabilityScore': self.stability_score,
            'boneFactor': self.bone_factor,
            'skinFactor': self.skin_factor,
            'faceRatio': self.face_ratio,
            'jawRatio': self.jaw_ratio,
            'severity': self.severity.to_dict(),
        }


@dataclass
class CheekResult:
    """볼 처짐 분석 결과"""

    score: int
    sag_score: int
    elasticity_score: int
    gravity_sag_score: int
    cheek_position: float      # 얼굴 높이 대비 볼 하단 위치 (0=이마, 1=턱)
    severity: Severity
    skin_contrib: int = 70
    bone_contrib: int = 30

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'sagScore': self.sag_score,
            'elasticityScore': self.elasticity_score,
            'gravitySagScore': self.gravity_sag_score,
            'cheekPosition': round(self.cheek_position, 4),
            'severity': self.severity.to_dict(),
            'skinContrib': self.skin_contrib,
            'boneContrib': self.bone_contrib,
        }


@dataclass
class ChinSagResult:
    """턱 처짐 분석 결과"""

    score: int
    jaw_sharp_score: int
    contour_score: int
    gravity_score: int
    jaw_ratio: Optional[float]
    severity: Severity
    future: str
    skin_contrib: int = 65
    bone_contrib: int = 35

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'jawSharpScore': self.jaw_sharp_score,
            'contourScore': self.contour_score,
            'gravityScore': self.gravity_score,
            'jawRatio': self.jaw_ratio,
            'severity': self.severity.to_dict(),
            'future': self.future,
            'skinContrib': self.skin_contrib,
            'boneContrib': self.bone_contrib,
        }


@dataclass
class MarionetteResult:
    """마리오네트 라인 분석 결과"""

    score: int
    sag_score: int
    depth_score: int
    gravity_score: int
    severity: Severity
    skin_contrib: int = 80
    bone_contrib: int = 20

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'sagScore': self.sag_score,
            'depthScore': self.depth_score,
            'gravityScore': self.gravity_score,
            'severity': self.severity.to_dict(),
            'skinContrib': self.skin_contrib,
            'boneContrib': self.bone_contrib,
        }


@dataclass
class NasolabialResult:
    """팔자주름 분석 결과"""

    score: int
    length_score: int
    depth_score: int
    left_score: int
    right_score: int
    asymmetry: int             # 좌우 길이 차이 (%)
    normalized_length: float
    normalized_depth: float
    severity: Severity
    skin_contrib: int = 75
    bone_contrib: int = 25

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'lengthScore': self.length_score,
            'depthScore': self.depth_score,
            'leftScore': self.left_score,
            'rightScore': self.right_score,
            'asymmetry': self.asymmetry,
            'normalizedLength': round(self.normalized_length, 4),
            'normalizedDepth': round(self.normalized_depth, 4),
            'severity': self.severity.to_dict(),
            'skinContrib': self.skin_contrib,
            'boneContrib': self.bone_contrib,
        }


@dataclass
class WrinkleResult:
    """눈가 주름 / 눈 주변 분석 결과"""

    score: int
    crow_feet_score: int
    under_eye_score: int
    smile_wrinkle_score: int
    glabellar_score: int
    eyelid_score: int
    left_score: int
    right_score: int
    severity: Severity
    skin_contrib: int = 85
    bone_contrib: int = 15

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'crowFeetScore': self.crow_feet_score,
            'underEyeScore': self.under_eye_score,
            'smileWrinkleScore': self.smile_wrinkle_score,
            'glabellarScore': self.glabellar_score,
            'eyelidScore': self.eyelid_score,
            'leftScore': self.left_score,
            'rightScore': self.right_score,
            'severity': self.severity.to_dict(),
            'skinContrib': self.skin_contrib,
            'boneContrib': self.bone_contrib,
        }


@dataclass
class UserProfile:
    """사용자 프로필 (선택 입력)"""

    age_value: Optional[int] = None   # 실제 나이
    age_label: Optional[str] = None   # 표시용 나이 라벨 (예: "30대 초반")
    gender: Optional[str] = None      # 'male' / 'female'

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['UserProfile']:
        """
        딕셔너리에서 생성 (camelCase / snake_case 모두 허용)

        Raises:
            ValueError: 나이가 정수가 아닌 경우 (35.0은 허용, 35.7은 거부)
        """
        if not data:
            return None
        age_value = data.get('age_value', data.get('ageValue'))
        if age_value is not None:
            number = float(age_value)
            if not number.is_integer():
                raise ValueError(f"age must be a whole number: {age_value!r}")
            age_value = int(number)
        return cls(
            age_value=age_value,
            age_label=data.get('age_label', data.get('ageLabel')),
            gender=data.get('gender'),
        )


@dataclass(frozen=True)
class AgeRange:
    """피부 나이 구간"""

    min: int
    max: int

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2

    def to_dict(self) -> Dict[str, Any]:
        return {'min': self.min, 'max': self.max}


@dataclass(frozen=True)
class Grade:
    """등급 (A~E)"""

    label: str
    text: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {'label': self.label, 'text': self.text, 'color': self.color}


@dataclass
class RelativeAge:
    """실제 나이 대비 피부 나이 비교"""

    diff: int                  # 양수: 실제 나이가 더 많음 (젊어 보임)
    age_midpoint: int
    age_value: int
    age_label: Optional[str]
    verdict: str               # 'younger' / 'about_right' / 'older'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'diff': self.diff,
            'ageMidpoint': self.age_midpoint,
            'ageValue': self.age_value,
            'ageLabel': self.age_label,
            'verdict': self.verdict,
        }


@dataclass
class FeatureEntry:
    """부위별 표시 항목"""

    key: str
    name: str
    icon: str
    score: int
    severity: Severity
    skin_contrib: int
    bone_contrib: int
    future: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'key': self.key,
            'name': self.name,
            'icon': self.icon,
            'score': self.score,
            'severity': self.severity.to_dict(),
            'skinContrib': self.skin_contrib,
            'boneContrib': self.bone_contrib,
        }
        if self.future is not None:
            result['future'] = self.future
        return result


@dataclass
class SkinAgeResult:
    """종합 피부 나이 결과"""

    total_score: int
    age_range: AgeRange
    grade: Grade
    bone_factor: int
    skin_factor: int
    features: List[FeatureEntry] = field(default_factory=list)
    relative_age: Optional[RelativeAge] = None
    weight_table: str = 'standard'
    raw_data: Dict[str, Any] = field(default_factory=dict)

    def feature(self, key: str) -> Optional[FeatureEntry]:
        """키로 부위 항목 찾기"""
        for entry in self.features:
            if entry.key == key:
                return entry
        return None

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'totalScore': self.total_score,
            'ageRange': self.age_range.to_dict(),
            'grade': self.grade.to_dict(),
            'boneFactor': self.bone_factor,
            'skinFactor': self.skin_factor,
            'features': [f.to_dict() for f in self.features],
            'relAge': self.relative_age.to_dict() if self.relative_age else None,
            'weightTable': self.weight_table,
            'rawData': {
                name: record.to_dict() for name, record in self.raw_data.items()
                if record is not None
            },
        }
