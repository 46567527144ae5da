"""
Skin Age Analyzer
3장 촬영 세션(neutral / smile / down) → 6개 부위 분석 → 종합 피부 나이
"""

import time
from typing import List, Optional, Sequence

import numpy as np

from ..models.analysis_models import SkinAgeResult, UserProfile
from ..models.landmark_models import Landmark, Pose, Session
from ..utils import get_logger
from .bone_structure_analyzer import BoneStructureAnalyzer
from .cheek_analyzer import CheekAnalyzer
from .chin_sag_analyzer import ChinSagAnalyzer
from .marionette_analyzer import MarionetteAnalyzer
from .nasolabial_analyzer import NasolabialAnalyzer
from .skin_age_scorer import SkinAgeScorer
from .wrinkle_analyzer import WrinkleAnalyzer

logger = get_logger(__name__)


class SkinAgeAnalyzer:
    """
    피부 나이 통합 분석 파이프라인

    Features:
    - 세션 / 랜드마크 / 이미지 입력 지원
    - 부위별 분석기 6종 + SkinAgeScorer
    - 랜드마크 검출기는 주입 가능 (기본: MediaPipe FaceDetector, 처음 사용할 때 생성)
    """

    def __init__(self, detector=None, scorer: Optional[SkinAgeScorer] = None):
        """
        Args:
            detector: detect(image) -> DetectionResult 를 제공하는 객체
            scorer: 종합 점수 계산기 (None이면 config 기준으로 생성)
        """
        self._detector = detector
        self.scorer = scorer or SkinAgeScorer()

        self.nasolabial_analyzer = NasolabialAnalyzer()
        self.cheek_analyzer = CheekAnalyzer()
        self.wrinkle_analyzer = WrinkleAnalyzer()
        self.bone_analyzer = BoneStructureAnalyzer()
        self.marionette_analyzer = MarionetteAnalyzer()
        self.chin_analyzer = ChinSagAnalyzer()

        logger.info(f"SkinAgeAnalyzer initialized ({self.scorer.table.name} weight table)")

    @property
    def detector(self):
        """랜드마크 검출기 (없으면 MediaPipe FaceDetector 생성)"""
        if self._detector is None:
            from .mediapipe import FaceDetector
            self._detector = FaceDetector()
        return self._detector

    def analyze_session(self, session: Session, profile: Optional[UserProfile] = None) -> SkinAgeResult:
        """
        촬영 세션 분석

        랜드마크 없이 이미지만 있는 촬영은 검출기로 랜드마크를 채운 뒤 분석한다.

        Args:
            session: neutral / smile / down 촬영
            profile: 사용자 프로필 (선택)

        Returns:
            SkinAgeResult

        Raises:
            DetectionError: 검출기 초기화 실패 또는 잘못된 이미지
        """
        for capture in session.captures:
            if not capture.landmarks and capture.image is not None:
                capture.landmarks = self._detect(capture.pose, capture.image)

        return self.analyze_landmarks(
            session.landmarks_for(Pose.NEUTRAL),
            session.landmarks_for(Pose.SMILE),
            session.landmarks_for(Pose.DOWN),
            profile=profile,
        )

    def analyze_landmarks(
        self,
        neutral: Optional[Sequence[Landmark]],
        smile: Optional[Sequence[Landmark]] = None,
        down: Optional[Sequence[Landmark]] = None,
        profile: Optional[UserProfile] = None,
    ) -> SkinAgeResult:
        """
        포즈별 랜드마크 세트로 분석

        유효하지 않은 세트는 각 분석기가 기본 결과로 대체하므로 예외가 발생하지 않는다.
        """
        start_time = time.time()
        logger.info(
            f"Analyzing landmarks: neutral={_count(neutral)}, smile={_count(smile)}, down={_count(down)}"
        )

        nasolabial = self.nasolabial_analyzer.analyze(neutral)
        cheek = self.cheek_analyzer.analyze(neutral, smile, down)
        wrinkle = self.wrinkle_analyzer.analyze(neutral, smile)
        bone = self.bone_analyzer.analyze(neutral, smile, down)
        marionette = self.marionette_analyzer.analyze(neutral, down)
        chin = self.chin_analyzer.analyze(neutral, down)   # down 사진을 bottom 포즈로 사용

        logger.debug(
            f"Feature scores: nasolabial={nasolabial.score} cheek={cheek.score} wrinkle={wrinkle.score} "
            f"bone={bone.score} marionette={marionette.score} chin={chin.score}"
        )

        result = self.scorer.calculate(nasolabial, cheek, wrinkle, bone, marionette, chin, profile)

        processing_time = (time.time() - start_time) * 1000
        logger.info(f"Analysis complete: score={result.total_score} grade={result.grade.label} ({processing_time:.1f}ms)")
        return result

    def analyze_images(
        self,
        neutral_image: np.ndarray,
        smile_image: Optional[np.ndarray] = None,
        down_image: Optional[np.ndarray] = None,
        profile: Optional[UserProfile] = None,
    ) -> SkinAgeResult:
        """
        BGR 이미지로 분석 (이미지만 담은 세션을 analyze_session에 전달)

        얼굴 검출에 실패한 포즈는 빈 랜드마크 세트가 되어 기본값으로 처리된다.

        Raises:
            DetectionError: 검출기 초기화 실패 또는 잘못된 이미지
        """
        session = Session()
        for pose, image in ((Pose.NEUTRAL, neutral_image), (Pose.SMILE, smile_image), (Pose.DOWN, down_image)):
            if image is None:
                continue
            session.add(pose, [], image)
        return self.analyze_session(session, profile)

    def _detect(self, pose: Pose, image: np.ndarray) -> List[Landmark]:
        detection = self.detector.detect(image)
        if not detection.success:
            logger.warning(f"[{pose.value}] face not detected, using default scores")
            return []
        return list(detection.landmarks)


def _count(landmarks: Optional[Sequence[Landmark]]) -> int:
    return 0 if landmarks is None else len(landmarks)
