"""촬영 품질 체크 (얼굴 크기 / 정면 여부)"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..models.landmark_models import Landmark
from ..utils import get_config, get_logger
from .constants import FACE_LANDMARKS
from .geometry import GeometryCalculator

logger = get_logger(__name__)


@dataclass
class FaceMetrics:
    """얼굴 크기 정보 (랜드마크 좌표 단위)"""

    face_height: float   # 이마 ~ 턱
    face_width: float    # 귀 ~ 귀
    ipd: float           # 양 눈 외안각 사이 거리
    cx: float            # 얼굴 중심 x
    cy: float            # 얼굴 중심 y
    scale: float         # 분석 스케일 (= face_height)


def get_face_metrics(landmarks: Optional[Sequence[Landmark]]) -> FaceMetrics:
    """
    얼굴 크기 정보 계산

    누락된 포인트는 원점으로 취급한다.
    """
    geo = GeometryCalculator
    lm = FACE_LANDMARKS

    forehead = geo.get_point(landmarks, lm['forehead'])
    chin = geo.get_point(landmarks, lm['chin'])
    face_height = geo.distance_2d(forehead, chin)
    face_width = geo.distance_2d(geo.get_point(landmarks, lm['left_ear']), geo.get_point(landmarks, lm['right_ear']))
    ipd = geo.distance_2d(
        geo.get_point(landmarks, lm['left_eye_outer']), geo.get_point(landmarks, lm['right_eye_outer'])
    )

    return FaceMetrics(
        face_height=face_height,
        face_width=face_width,
        ipd=ipd,
        cx=(forehead.x + chin.x) / 2,
        cy=(forehead.y + chin.y) / 2,
        scale=face_height,
    )


def is_face_good(
    landmarks: Optional[Sequence[Landmark]],
    min_face_height: Optional[float] = None,
    max_nose_offset: Optional[float] = None,
) -> bool:
    """
    촬영에 적합한 얼굴인지 판정

    Args:
        landmarks: 랜드마크 세트
        min_face_height: 최소 이마-턱 거리 (None이면 config, 기본 80)
        max_nose_offset: 코끝 좌우 편차 / 얼굴 너비 최대값 (None이면 config, 기본 0.25)

    Returns:
        유효한 세트이고, 충분히 크고, 대략 정면이면 True
    """
    config = get_config()
    if min_face_height is None:
        min_face_height = float(config.get('capture_quality.min_face_height', 80.0))
    if max_nose_offset is None:
        max_nose_offset = float(config.get('capture_quality.max_nose_offset', 0.25))

    if not GeometryCalculator.is_usable(landmarks, int(config.get('analysis.min_landmarks', 400))):
        return False

    metrics = get_face_metrics(landmarks)
    if metrics.face_height < min_face_height:
        logger.debug(f"Face too small: height={metrics.face_height:.1f}")
        return False
    if metrics.face_width <= 0:
        return False

    # 코끝이 두 눈 사이 가운데에 있어야 정면
    nose = landmarks[FACE_LANDMARKS['nose_tip']]
    left_eye = landmarks[FACE_LANDMARKS['left_eye_outer']]
    right_eye = landmarks[FACE_LANDMARKS['right_eye_outer']]
    if nose is None or left_eye is None or right_eye is None:
        return False

    eye_mid_x = (left_eye.x + right_eye.x) / 2
    nose_offset = abs(nose.x - eye_mid_x) / metrics.face_width
    if nose_offset > max_nose_offset:
        logger.debug(f"Face rotated: nose offset={nose_offset:.3f}")
        return False

    return True
