"""
Skin Age Analyzer
MediaPipe FaceMesh 랜드마크 기반 피부 나이 추정
"""

__version__ = "1.0.0"

from .core import (
    SkinAgeAnalyzer,
    SkinAgeScorer,
    get_face_metrics,
    is_face_good,
)
from .models import Landmark, Pose, Session, UserProfile, SkinAgeResult

__all__ = [
    '__version__',
    'SkinAgeAnalyzer', 'SkinAgeScorer', 'get_face_metrics', 'is_face_good',
    'Landmark', 'Pose', 'Session', 'UserProfile', 'SkinAgeResult',
]
