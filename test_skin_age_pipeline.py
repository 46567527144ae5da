"""SkinAgeAnalyzer 파이프라인 / 촬영 품질 테스트"""

import numpy as np
import pytest

from conftest import build_face
from skin_age_analyzer import SkinAgeAnalyzer, get_face_metrics, is_face_good
from skin_age_analyzer.core import SkinAgeScorer
from skin_age_analyzer.models import DetectionResult, Landmark, Pose, Session, UserProfile
from skin_age_analyzer.utils import DetectionError


class FakeDetector:
    """이미지 첫 픽셀 값으로 검출 성공/실패를 정하는 가짜 검출기"""

    def __init__(self, landmarks):
        self.landmarks = landmarks
        self.calls = 0

    def detect(self, image):
        self.calls += 1
        if image is None or image.size == 0:
            raise DetectionError("Empty or invalid image")
        if image.flat[0] == 0:
            return DetectionResult(success=False)
        return DetectionResult(success=True, landmarks=list(self.landmarks), confidence=0.95)


def _image(value=255):
    return np.full((48, 64, 3), value, dtype=np.uint8)


def _assert_valid(result):
    assert 0 <= result.total_score <= 100
    assert result.skin_factor == 100 - result.bone_factor
    for entry in result.features:
        assert 0 <= entry.score <= 100
        assert entry.skin_contrib + entry.bone_contrib == 100


def test_analyze_session(session):
    result = SkinAgeAnalyzer(detector=FakeDetector([])).analyze_session(
        session, UserProfile(age_value=30, gender='male')
    )
    _assert_valid(result)
    assert result.relative_age.age_value == 30
    assert result.raw_data['bone'].stability_score == 100


def test_analyze_landmarks_matches_session(session, face):
    analyzer = SkinAgeAnalyzer()
    from_session = analyzer.analyze_session(session)
    direct = analyzer.analyze_landmarks(face, list(face), list(face))
    assert from_session.to_dict()['totalScore'] == direct.total_score
    assert [f.score for f in from_session.features] == [f.score for f in direct.features]


def test_empty_session_falls_back_to_defaults():
    result = SkinAgeAnalyzer().analyze_session(Session())
    _assert_valid(result)
    assert result.total_score == 70
    assert result.bone_factor == 25


def test_neutral_only_uses_pose_fallbacks(face):
    result = SkinAgeAnalyzer().analyze_landmarks(face)
    assert result.raw_data['wrinkle'].smile_wrinkle_score == 75
    assert result.raw_data['cheek'].elasticity_score == 75
    assert result.raw_data['chin'].gravity_score == 65
    _assert_valid(result)


def test_basic_scorer_injection(face):
    result = SkinAgeAnalyzer(scorer=SkinAgeScorer('basic')).analyze_landmarks(face)
    assert result.weight_table == 'basic'
    _assert_valid(result)


def test_analyze_images_with_injected_detector(face):
    detector = FakeDetector(face)
    analyzer = SkinAgeAnalyzer(detector=detector)
    result = analyzer.analyze_images(_image(), _image(), _image())
    assert detector.calls == 3
    assert result.to_dict() == analyzer.analyze_landmarks(face, face, face).to_dict()


def test_analyze_images_detection_failure_uses_defaults(face):
    detector = FakeDetector(face)
    result = SkinAgeAnalyzer(detector=detector).analyze_images(_image(0))
    assert detector.calls == 1
    assert result.raw_data['nasolabial'] == SkinAgeAnalyzer().nasolabial_analyzer.default_result()
    _assert_valid(result)


def test_analyze_images_invalid_image_raises(face):
    with pytest.raises(DetectionError):
        SkinAgeAnalyzer(detector=FakeDetector(face)).analyze_images(np.zeros((0, 0, 3), dtype=np.uint8))


def test_analyze_session_detects_image_only_captures(face):
    detector = FakeDetector(face)
    session = Session().add(Pose.NEUTRAL, [], _image()).add(Pose.SMILE, list(face))

    result = SkinAgeAnalyzer(detector=detector).analyze_session(session)

    assert detector.calls == 1
    assert len(session.landmarks_for(Pose.NEUTRAL)) == 468
    assert session.captures[0].image is not None
    assert result.to_dict() == SkinAgeAnalyzer().analyze_landmarks(face, face).to_dict()


def test_session_add_replaces_pose(face):
    session = Session().add(Pose.NEUTRAL, []).add(Pose.NEUTRAL, face)
    assert len(session.captures) == 1
    assert session.landmarks_for(Pose.NEUTRAL) is face
    assert session.landmarks_for(Pose.DOWN) is None


# ---------- 촬영 품질 ----------

def test_face_metrics(face):
    metrics = get_face_metrics(face)
    assert metrics.face_height == pytest.approx(300.0)
    assert metrics.face_width == pytest.approx(240.0)
    assert metrics.ipd == pytest.approx(120.0)
    assert (metrics.cx, metrics.cy) == (pytest.approx(320.0), pytest.approx(250.0))
    assert metrics.scale == metrics.face_height


def test_is_face_good(face):
    assert is_face_good(face)
    assert not is_face_good(None)
    assert not is_face_good(build_face(count=350))


def test_is_face_good_rejects_small_face():
    assert not is_face_good(build_face(scale=0.2))          # 얼굴 높이 60


def test_is_face_good_rejects_rotated_face():
    rotated = build_face({4: (390, 260, 0)})                  # 코끝 편차 70 / 240
    assert not is_face_good(rotated)
    assert is_face_good(rotated, max_nose_offset=0.3)


def test_is_face_good_custom_height(face):
    assert not is_face_good(face, min_face_height=400)


def test_landmark_is_immutable():
    point = Landmark(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        point.x = 5.0
