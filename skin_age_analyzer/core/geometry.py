"""얼굴 기하학 계산 유틸리티"""

import math
from typing import List, Optional, Sequence

import numpy as np

from ..models.landmark_models import Landmark, ZERO_LANDMARK
from .constants import FACE_LANDMARKS


class GeometryCalculator:
    """랜드마크 기반 거리 / 통계 계산 (모두 순수 함수)"""

    @staticmethod
    def get_point(landmarks: Optional[Sequence[Landmark]], index: int) -> Landmark:
        """
        인덱스의 랜드마크 반환 (없으면 원점)

        Args:
            landmarks: 랜드마크 리스트 (None 허용)
            index: MediaPipe 랜드마크 인덱스

        Returns:
            Landmark (누락 시 ZERO_LANDMARK)
        """
        if not landmarks or index < 0 or index >= len(landmarks):
            return ZERO_LANDMARK
        point = landmarks[index]
        return point if point is not None else ZERO_LANDMARK

    @staticmethod
    def get_points(landmarks: Optional[Sequence[Landmark]], indices: Sequence[int]) -> List[Landmark]:
        """여러 인덱스의 랜드마크 반환"""
        return [GeometryCalculator.get_point(landmarks, i) for i in indices]

    @staticmethod
    def distance_2d(a: Optional[Landmark], b: Optional[Landmark]) -> float:
        """두 랜드마크 간 2D 유클리드 거리 (x, y)"""
        if a is None or b is None:
            return 0.0
        return math.hypot(a.x - b.x, a.y - b.y)

    @staticmethod
    def distance_3d(a: Optional[Landmark], b: Optional[Landmark]) -> float:
        """두 랜드마크 간 3D 유클리드 거리 (x, y, z)"""
        if a is None or b is None:
            return 0.0
        dx = a.x - b.x
        dy = a.y - b.y
        dz = a.z - b.z
        return math.sqrt(dx**2 + dy**2 + dz**2)

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """평균 (빈 입력은 0)"""
        if len(values) == 0:
            return 0.0
        return float(np.mean(values))

    @staticmethod
    def variance(values: Sequence[float]) -> float:
        """모분산 (빈 입력은 0)"""
        if len(values) == 0:
            return 0.0
        return float(np.var(values))

    @staticmethod
    def relative_variance(values: Sequence[float]) -> float:
        """
        상대 변동 (표준편차 / 평균)

        값이 2개 미만이거나 평균이 0이면 0 반환
        """
        if len(values) < 2:
            return 0.0
        m = float(np.mean(values))
        if m == 0:
            return 0.0
        return float(np.std(values)) / m

    @staticmethod
    def clamp(value: float, lo: float, hi: float) -> float:
        """value를 [lo, hi] 범위로 제한"""
        return max(lo, min(hi, value))

    @staticmethod
    def round_half_up(value: float) -> int:
        """반올림 (0.5는 항상 위로, 은행원 반올림 아님)"""
        return int(math.floor(value + 0.5))

    @staticmethod
    def face_scale(landmarks: Optional[Sequence[Landmark]], use_3d: bool = False) -> float:
        """
        얼굴 스케일 (이마-턱 거리)

        Args:
            landmarks: 468개 landmarks
            use_3d: True면 z 포함 3D 거리

        Returns:
            이마(10) ~ 턱(152) 거리
        """
        forehead = GeometryCalculator.get_point(landmarks, FACE_LANDMARKS['forehead'])
        chin = GeometryCalculator.get_point(landmarks, FACE_LANDMARKS['chin'])
        if use_3d:
            return GeometryCalculator.distance_3d(forehead, chin)
        return GeometryCalculator.distance_2d(forehead, chin)

    @staticmethod
    def is_finite(landmarks: Sequence[Landmark]) -> bool:
        """모든 좌표가 유한한 값인지 (None 포인트는 원점으로 보므로 통과)"""
        return all(
            math.isfinite(p.x) and math.isfinite(p.y) and math.isfinite(p.z)
            for p in landmarks if p is not None
        )

    @staticmethod
    def is_usable(landmarks: Optional[Sequence[Landmark]], min_landmarks: int = 400) -> bool:
        """랜드마크 세트가 분석 가능한지 (개수가 min_landmarks 초과, NaN/inf 좌표 없음)"""
        return (
            landmarks is not None
            and len(landmarks) > min_landmarks
            and GeometryCalculator.is_finite(landmarks)
        )

    @staticmethod
    def region_z(landmarks: Optional[Sequence[Landmark]], indices: Sequence[int]) -> List[float]:
        """영역 포인트들의 z 좌표"""
        return [p.z for p in GeometryCalculator.get_points(landmarks, indices)]

    @staticmethod
    def region_mean_y(landmarks: Optional[Sequence[Landmark]], indices: Sequence[int]) -> float:
        """영역 포인트들의 평균 y 좌표"""
        return GeometryCalculator.mean([p.y for p in GeometryCalculator.get_points(landmarks, indices)])
