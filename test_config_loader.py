"""Config 로더 테스트"""

import pytest

from skin_age_analyzer.utils import Config, ConfigurationError, get_config


def test_packaged_config_values():
    config = get_config()
    assert config.get('analysis.min_landmarks') == 400
    assert config.get('analysis.min_face_scale') == 10.0
    assert config.get('scoring.weight_table') == 'standard'
    assert config.capture_quality.min_face_height == 80.0
    assert config.mediapipe.detection.max_num_faces == 1


def test_get_default_for_missing_key():
    config = get_config()
    assert config.get('analysis.nothing', 'fallback') == 'fallback'
    assert config.get('analysis.min_landmarks.deeper') is None


def test_missing_attribute_raises():
    config = get_config()
    with pytest.raises(AttributeError):
        config.not_a_section
    with pytest.raises(AttributeError):
        config.analysis.not_a_key


def test_custom_config_file(tmp_path):
    path = tmp_path / 'custom.yaml'
    path.write_text('scoring:\n  weight_table: basic\n', encoding='utf-8')
    config = Config(str(path))
    assert config.get('scoring.weight_table') == 'basic'
    assert config.scoring.get('improvement_threshold', 75) == 75
    assert config.to_dict() == {'scoring': {'weight_table': 'basic'}}


def test_env_override(tmp_path, monkeypatch):
    path = tmp_path / 'env.yaml'
    path.write_text('analysis:\n  min_landmarks: 300\n', encoding='utf-8')
    monkeypatch.setenv('SKIN_AGE_CONFIG_PATH', str(path))
    assert Config().get('analysis.min_landmarks') == 300


def test_reload_picks_up_changes(tmp_path):
    path = tmp_path / 'live.yaml'
    path.write_text('analysis:\n  min_face_scale: 10\n', encoding='utf-8')
    config = Config(str(path))
    path.write_text('analysis:\n  min_face_scale: 20\n', encoding='utf-8')
    config.reload()
    assert config.get('analysis.min_face_scale') == 20


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        Config(str(tmp_path / 'missing.yaml'))


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text('analysis: [unclosed\n', encoding='utf-8')
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_non_mapping_root_raises(tmp_path):
    path = tmp_path / 'list.yaml'
    path.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ConfigurationError):
        Config(str(path))
