"""
Data models for skin age analyzer.
"""
from .landmark_models import (
    Pose,
    Landmark,
    ZERO_LANDMARK,
    DetectionResult,
    Capture,
    Session,
    landmarks_from_points,
)
from .analysis_models import (
    Severity,
    BoneStructureResult,
    CheekResult,
    ChinSagResult,
    MarionetteResult,
    NasolabialResult,
    WrinkleResult,
    UserProfile,
    AgeRange,
    Grade,
    RelativeAge,
    FeatureEntry,
    SkinAgeResult,
)

__all__ = [
    'Pose', 'Landmark', 'ZERO_LANDMARK', 'DetectionResult', 'Capture', 'Session',
    'landmarks_from_points',
    'Severity', 'BoneStructureResult', 'CheekResult', 'ChinSagResult',
    'MarionetteResult', 'NasolabialResult', 'WrinkleResult',
    'UserProfile', 'AgeRange', 'Grade', 'RelativeAge', 'FeatureEntry', 'SkinAgeResult',
]
