"""리포트 JSON / 세션 파일 / CLI 테스트"""

import json

import pytest

from skin_age_analyzer.core import SkinAgeScorer
from skin_age_analyzer.models import FeatureEntry, Pose, Severity, UserProfile
from skin_age_analyzer.run_skin_age_analysis import main
from skin_age_analyzer.utils import (
    LandmarkInputError,
    build_improvement_tiers,
    load_session_json,
    save_json,
    to_json_string,
    to_report_json,
)

OK = Severity('Good', '#27ae60', 1)


def _entry(key, score):
    return FeatureEntry(key, key, '*', score, OK, 70, 30)


def _points(landmarks):
    return [[p.x, p.y, p.z] for p in landmarks]


def test_no_tiers_when_everything_above_threshold():
    assert build_improvement_tiers([_entry('nasolabial', 80), _entry('chin', 75)]) == []


def test_fold_group_tiers():
    tiers = build_improvement_tiers([_entry('nasolabial', 60), _entry('chin', 90)])
    assert [t['key'] for t in tiers] == ['home', 'pro', 'medical']
    home = tiers[0]['items']
    assert home[:2] == ['Daily SPF50+ sunscreen', 'Moisturizer (morning and night)']
    assert 'Retinol cream' in home
    assert 'Hyaluronic acid filler' in tiers[2]['items']
    assert 'HIFU' not in tiers[1]['items']


def test_sag_and_wrinkle_groups():
    tiers = build_improvement_tiers([_entry('elasticity', 50), _entry('crowFeet', 70)])
    pro = tiers[1]['items']
    assert 'HIFU' in pro
    assert 'Microneedling' in pro
    assert 'EMS facial' not in pro


def test_custom_threshold():
    assert build_improvement_tiers([_entry('glabellar', 80)], threshold=85) != []


def test_report_json_contains_result_and_tiers():
    result = SkinAgeScorer().calculate(None, None, None, None)
    report = to_report_json(result, source='session.json')
    assert report['totalScore'] == result.total_score
    assert report['source'] == 'session.json'
    assert report['improvements']          # 기본 점수는 모두 75 미만
    assert json.loads(to_json_string(result))['grade']['label'] == result.grade.label


def test_save_json_creates_directory(tmp_path):
    result = SkinAgeScorer().calculate(None, None, None, None)
    out = tmp_path / 'reports' / 'report.json'
    saved = save_json(result, str(out))
    on_disk = json.loads(out.read_text(encoding='utf-8'))
    assert on_disk['totalScore'] == saved['totalScore'] == result.total_score


def test_load_session_json(tmp_path, face):
    path = tmp_path / 'session.json'
    path.write_text(json.dumps({
        'neutral': _points(face),
        'smile': [{'x': p.x, 'y': p.y, 'z': p.z} for p in face],
        'profile': {'ageValue': 41, 'ageLabel': 'early 40s', 'gender': 'female'},
    }), encoding='utf-8')

    session, profile = load_session_json(str(path))
    assert len(session.landmarks_for(Pose.NEUTRAL)) == 468
    assert session.landmarks_for(Pose.SMILE)[10].y == pytest.approx(100.0)
    assert session.landmarks_for(Pose.DOWN) is None
    assert profile.age_value == 41
    assert profile.gender == 'female'


@pytest.mark.parametrize('content', [
    'not json',
    '[1, 2, 3]',
    '{"smile": []}',
    '{"neutral": 5}',
    '{"neutral": [["a", "b"]]}',
    '{"neutral": [], "profile": "x"}',
])
def test_load_session_json_rejects_malformed(tmp_path, content):
    path = tmp_path / 'bad.json'
    path.write_text(content, encoding='utf-8')
    with pytest.raises(LandmarkInputError):
        load_session_json(str(path))


def test_load_session_json_missing_file(tmp_path):
    with pytest.raises(LandmarkInputError):
        load_session_json(str(tmp_path / 'nope.json'))


def test_cli_session_report(tmp_path, face, capsys):
    session_path = tmp_path / 'session.json'
    session_path.write_text(json.dumps({'neutral': _points(face), 'down': _points(face)}), encoding='utf-8')
    out = tmp_path / 'report.json'

    code = main(['--session', str(session_path), '--output', str(out), '--age', '35', '--gender', 'male'])

    assert code == 0
    report = json.loads(out.read_text(encoding='utf-8'))
    assert report['relAge']['ageValue'] == 35
    assert 'Total score' in capsys.readouterr().out


def test_cli_basic_table(tmp_path, face):
    session_path = tmp_path / 'session.json'
    session_path.write_text(json.dumps({'neutral': _points(face)}), encoding='utf-8')
    out = tmp_path / 'report.json'
    assert main(['--session', str(session_path), '--output', str(out), '--weight-table', 'basic']) == 0
    assert json.loads(out.read_text(encoding='utf-8'))['weightTable'] == 'basic'


def test_cli_missing_session_fails(tmp_path):
    assert main(['--session', str(tmp_path / 'nope.json'), '--output', str(tmp_path / 'r.json')]) == 1
    assert not (tmp_path / 'r.json').exists()


@pytest.mark.parametrize('bad', [float('nan'), float('inf'), float('-inf')])
def test_load_session_json_rejects_non_finite(tmp_path, face, bad):
    points = _points(face)
    points[10][1] = bad
    path = tmp_path / 'session.json'
    path.write_text(json.dumps({'neutral': points}), encoding='utf-8')   # NaN / Infinity 리터럴
    with pytest.raises(LandmarkInputError):
        load_session_json(str(path))


def test_load_session_json_rejects_non_finite_dict_point(tmp_path, face):
    smile = [{'x': p.x, 'y': p.y, 'z': p.z} for p in face]
    smile[152]['z'] = float('nan')
    path = tmp_path / 'session.json'
    path.write_text(json.dumps({'neutral': _points(face), 'smile': smile}), encoding='utf-8')
    with pytest.raises(LandmarkInputError):
        load_session_json(str(path))


def test_cli_non_finite_session_fails(tmp_path, face):
    points = _points(face)
    points[152][2] = float('inf')
    session_path = tmp_path / 'session.json'
    session_path.write_text(json.dumps({'neutral': points}), encoding='utf-8')
    out = tmp_path / 'r.json'
    assert main(['--session', str(session_path), '--output', str(out)]) == 1
    assert not out.exists()


def test_profile_age_must_be_whole_number():
    assert UserProfile.from_dict({'ageValue': 35.0}).age_value == 35
    assert UserProfile.from_dict({'age_value': '41'}).age_value == 41
    with pytest.raises(ValueError):
        UserProfile.from_dict({'ageValue': 35.7})


def test_load_session_json_rejects_fractional_age(tmp_path, face):
    path = tmp_path / 'session.json'
    path.write_text(json.dumps({'neutral': _points(face), 'profile': {'ageValue': 35.7}}), encoding='utf-8')
    with pytest.raises(LandmarkInputError):
        load_session_json(str(path))
