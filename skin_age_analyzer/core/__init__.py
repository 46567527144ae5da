"""
Core analysis engine package.
"""
# MediaPipe 검출기는 opencv/mediapipe 의존성 때문에 여기서 import하지 않음
# 필요하면 core.mediapipe에서 직접 import

from .geometry import GeometryCalculator
from .severity import SeverityScale, get_severity, chin_future
from .bone_structure_analyzer import BoneStructureAnalyzer
from .cheek_analyzer import CheekAnalyzer
from .chin_sag_analyzer import ChinSagAnalyzer
from .marionette_analyzer import MarionetteAnalyzer
from .nasolabial_analyzer import NasolabialAnalyzer
from .wrinkle_analyzer import WrinkleAnalyzer
from .skin_age_scorer import SkinAgeScorer, WeightTable, get_weight_table
from .capture_quality import FaceMetrics, get_face_metrics, is_face_good
from .skin_age_analyzer import SkinAgeAnalyzer

__all__ = [
    'GeometryCalculator', 'SeverityScale', 'get_severity', 'chin_future',
    'BoneStructureAnalyzer', 'CheekAnalyzer', 'ChinSagAnalyzer',
    'MarionetteAnalyzer', 'NasolabialAnalyzer', 'WrinkleAnalyzer',
    'SkinAgeScorer', 'WeightTable', 'get_weight_table',
    'FaceMetrics', 'get_face_metrics', 'is_face_good',
    'SkinAgeAnalyzer',
]
