"""랜드마크 / 촬영 세션 데이터 모델 정의"""

from dataclasses import dataclass, field
import math
from typing import List, Optional
from enum import Enum

import numpy as np


class Pose(Enum):
    """촬영 포즈"""
    NEUTRAL = "neutral"    # 정면 무표정
    SMILE = "smile"        # 정면 미소
    DOWN = "down"          # 살짝 아래를 향함 (중력 처짐 확인)


@dataclass(frozen=True)
class Landmark:
    """단일 랜드마크 포인트 (생성 후 변경 불가)"""

    x: float  # 이미지 평면 x (픽셀 단위)
    y: float  # 이미지 평면 y (픽셀 단위)
    z: float  # 상대 깊이 (실제 거리 아님)
    visibility: float = 1.0  # 가시성 점수 (0-1)

    # 정규화 좌표에서 변환된 경우의 원본 픽셀 위치
    pixel_x: Optional[int] = None
    pixel_y: Optional[int] = None


# 누락된 랜드마크는 원점으로 취급
ZERO_LANDMARK = Landmark(x=0.0, y=0.0, z=0.0)


@dataclass
class DetectionResult:
    """얼굴 검출 결과"""

    success: bool
    landmarks: List[Landmark] = field(default_factory=list)
    confidence: float = 0.0
    processing_time: float = 0.0  # ms


@dataclass
class Capture:
    """단일 포즈 촬영 (랜드마크 + 원본 이미지)"""

    pose: Pose
    landmarks: List[Landmark] = field(default_factory=list)
    image: Optional[np.ndarray] = None


@dataclass
class Session:
    """한 번의 진단 세션 (neutral / smile / down 3장)"""

    captures: List[Capture] = field(default_factory=list)

    def landmarks_for(self, pose: Pose) -> Optional[List[Landmark]]:
        """
        포즈별 랜드마크 반환

        Args:
            pose: 찾을 포즈

        Returns:
            해당 포즈의 랜드마크 리스트 (촬영이 없으면 None)
        """
        for capture in self.captures:
            if capture.pose == pose:
                return capture.landmarks
        return None

    def add(self, pose: Pose, landmarks: List[Landmark], image: Optional[np.ndarray] = None) -> 'Session':
        """촬영 추가 (같은 포즈가 있으면 교체)"""
        self.captures = [c for c in self.captures if c.pose != pose]
        self.captures.append(Capture(pose=pose, landmarks=landmarks, image=image))
        return self


def _coord(value) -> float:
    """좌표 하나를 float로 변환 (NaN / inf 거부)"""
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"non-finite coordinate: {value!r}")
    return number


def landmarks_from_points(points) -> List[Landmark]:
    """
    [[x, y, z], ...] 또는 [{'x':..,'y':..,'z':..}, ...] 형식을 Landmark 리스트로 변환

    Args:
        points: 좌표 시퀀스 (None이면 빈 리스트)

    Returns:
        Landmark 리스트

    Raises:
        ValueError: 숫자가 아니거나 유한하지 않은 좌표
    """
    if points is None:
        return []

    landmarks = []
    for p in points:
        if isinstance(p, dict):
            landmarks.append(Landmark(
                x=_coord(p.get('x', 0.0)),
                y=_coord(p.get('y', 0.0)),
                z=_coord(p.get('z', 0.0)),
            ))
        else:
            x, y = _coord(p[0]), _coord(p[1])
            z = _coord(p[2]) if len(p) > 2 else 0.0
            landmarks.append(Landmark(x=x, y=y, z=z))
    return landmarks
