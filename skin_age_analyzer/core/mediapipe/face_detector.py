"""MediaPipe FaceMesh 기반 얼굴 랜드마크 검출기"""

import time
from typing import Optional

import cv2
import mediapipe as mp
import numpy as np

from ...models.landmark_models import DetectionResult, Landmark
from ...utils import DetectionError, get_config, get_logger

logger = get_logger(__name__)


def load_image(image_path: str) -> np.ndarray:
    """
    이미지 파일 로드 (BGR)

    Raises:
        DetectionError: 파일을 읽을 수 없는 경우
    """
    image = cv2.imread(str(image_path))
    if image is None:
        raise DetectionError(f"Cannot read image: {image_path}")
    return image


class FaceDetector:
    """
    MediaPipe FaceMesh 기반 얼굴 검출기

    랜드마크는 픽셀 단위로 변환된다 (x·w, y·h, z·w).
    분석기 상수는 이 스케일을 기준으로 한다.
    """

    def __init__(self):
        """초기화"""
        self.config = get_config()

        # MediaPipe 설정 가져오기
        mp_config = self.config.mediapipe.detection

        try:
            self.face_mesh = mp.solutions.face_mesh.FaceMesh(
                static_image_mode=mp_config.static_image_mode,
                max_num_faces=mp_config.max_num_faces,
                refine_landmarks=mp_config.refine_landmarks,
                min_detection_confidence=mp_config.min_detection_confidence,
                min_tracking_confidence=mp_config.min_tracking_confidence
            )
            logger.info("MediaPipe FaceMesh initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize MediaPipe FaceMesh: {e}")
            raise DetectionError(f"Failed to initialize MediaPipe FaceMesh: {e}") from e

    def detect(self, image: Optional[np.ndarray]) -> DetectionResult:
        """
        이미지에서 얼굴 검출 수행

        Args:
            image: BGR 형식 이미지 (H, W, 3) 또는 grayscale (H, W)

        Returns:
            DetectionResult (얼굴이 없으면 success=False, 빈 랜드마크)

        Raises:
            DetectionError: 이미지가 비어있거나 형식이 잘못된 경우
        """
        if image is None or not isinstance(image, np.ndarray) or image.size == 0:
            raise DetectionError("Empty or invalid image")
        if image.ndim not in (2, 3):
            raise DetectionError(f"Unsupported image shape: {image.shape}")

        start_time = time.time()

        # BGR → RGB 변환 (MediaPipe 요구사항)
        if image.ndim == 3:
            image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        else:
            image_rgb = cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)

        results = self.face_mesh.process(image_rgb)

        processing_time = (time.time() - start_time) * 1000  # ms

        if not results.multi_face_landmarks:
            logger.warning("No face detected")
            return DetectionResult(
                success=False,
                landmarks=[],
                confidence=0.0,
                processing_time=processing_time
            )

        # 첫 번째 얼굴만 처리 (max_num_faces=1 설정)
        face_landmarks = results.multi_face_landmarks[0]

        # 정규화 좌표 → 픽셀 단위
        h, w = image.shape[:2]
        landmarks = []

        for lm in face_landmarks.landmark:
            landmarks.append(Landmark(
                x=lm.x * w,
                y=lm.y * h,
                z=lm.z * w,
                visibility=lm.visibility if hasattr(lm, 'visibility') else 1.0,
                pixel_x=int(lm.x * w),
                pixel_y=int(lm.y * h)
            ))

        logger.info(f"Detected face with {len(landmarks)} landmarks ({processing_time:.1f}ms)")

        return DetectionResult(
            success=True,
            landmarks=landmarks,
            confidence=0.95,  # MediaPipe FaceMesh는 신뢰도를 주지 않음
            processing_time=processing_time
        )

    def close(self):
        """리소스 정리"""
        if getattr(self, 'face_mesh', None) is not None:
            self.face_mesh.close()
            self.face_mesh = None
            logger.debug("MediaPipe FaceMesh closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __del__(self):
        self.close()
