"""GeometryCalculator / SeverityScale 테스트"""

import pytest

from skin_age_analyzer.core.geometry import GeometryCalculator as geo
from skin_age_analyzer.core.severity import SeverityScale, chin_future, get_severity
from skin_age_analyzer.models import Landmark, ZERO_LANDMARK


def test_get_point_missing_returns_zero_vector(face):
    assert geo.get_point(face, 10) == face[10]
    assert geo.get_point(face, 999) == ZERO_LANDMARK
    assert geo.get_point(None, 0) == ZERO_LANDMARK
    assert geo.get_point([], 3) == ZERO_LANDMARK


def test_distances():
    a = Landmark(0, 0, 0)
    b = Landmark(3, 4, 12)
    assert geo.distance_2d(a, b) == pytest.approx(5.0)
    assert geo.distance_3d(a, b) == pytest.approx(13.0)
    assert geo.distance_2d(None, b) == 0.0
    assert geo.distance_3d(a, None) == 0.0


def test_statistics_on_empty_and_small_inputs():
    assert geo.mean([]) == 0.0
    assert geo.variance([]) == 0.0
    assert geo.relative_variance([5.0]) == 0.0
    assert geo.relative_variance([0.0, 0.0]) == 0.0


def test_statistics_values():
    assert geo.mean([1, 2, 3]) == pytest.approx(2.0)
    assert geo.variance([1, 3]) == pytest.approx(1.0)      # 모분산
    assert geo.relative_variance([1, 3]) == pytest.approx(0.5)


def test_round_half_up():
    assert geo.round_half_up(2.5) == 3
    assert geo.round_half_up(3.5) == 4
    assert geo.round_half_up(2.49) == 2
    assert geo.round_half_up(-0.5) == 0
    assert geo.round_half_up(-8.5) == -8


def test_clamp():
    assert geo.clamp(120, 0, 100) == 100
    assert geo.clamp(-3, 0, 100) == 0
    assert geo.clamp(42, 0, 100) == 42


def test_face_scale(face):
    assert geo.face_scale(face) == pytest.approx(300.0)
    tilted = list(face)
    tilted[152] = Landmark(320, 400, 400)
    assert geo.face_scale(tilted) == pytest.approx(300.0)
    assert geo.face_scale(tilted, use_3d=True) == pytest.approx(500.0)


def test_is_usable_requires_more_than_min(make_face):
    assert not geo.is_usable(None)
    assert not geo.is_usable(make_face(count=400))
    assert geo.is_usable(make_face(count=401))


def test_is_usable_rejects_non_finite_coordinates(make_face):
    assert geo.is_finite(make_face())
    assert not geo.is_usable(make_face({10: (320, float('nan'), 0)}))
    assert not geo.is_usable(make_face({4: (float('inf'), 260, 0)}))
    assert not geo.is_usable(make_face({152: (320, 400, float('-inf'))}))


def test_severity_scale_bands():
    scale = SeverityScale([(80, 'a', '#1'), (65, 'b', '#2'), (45, 'c', '#3'), (0, 'd', '#4')])
    assert scale.classify(80).level == 0
    assert scale.classify(79.9).level == 1
    assert scale.classify(45).label == 'c'
    assert scale.classify(10).level == 3
    assert scale.classify(-5).color == '#4'


def test_severity_scale_rejects_bad_bands():
    with pytest.raises(ValueError):
        SeverityScale([(80, 'a', '#1'), (65, 'b', '#2'), (0, 'c', '#3')])
    with pytest.raises(ValueError):
        SeverityScale([(65, 'a', '#1'), (80, 'b', '#2'), (45, 'c', '#3'), (0, 'd', '#4')])


def test_named_scales():
    assert get_severity('wrinkle', 72).level == 1
    assert get_severity('chin', 47).level == 3
    assert get_severity('nasolabial', 45).level == 2
    assert chin_future(90) == 'Low sagging risk'
    assert chin_future(10) == 'Early care recommended'
