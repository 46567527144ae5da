"""SkinAgeScorer 테스트"""

import pytest

from skin_age_analyzer.core import (
    BoneStructureAnalyzer,
    CheekAnalyzer,
    NasolabialAnalyzer,
    SkinAgeScorer,
    WeightTable,
    WrinkleAnalyzer,
    get_weight_table,
)
from skin_age_analyzer.core.constants import WEIGHT_TABLES
from skin_age_analyzer.core.skin_age_scorer import (
    BASIC_EXTRACTORS,
    compare_age,
    score_to_age_range,
    score_to_grade,
)
from skin_age_analyzer.models import AgeRange, UserProfile

FEATURE_ORDER = [
    'glabellar', 'eyelid', 'crowFeet', 'underEye',
    'nasolabial', 'cheekSag', 'elasticity', 'smileWrinkle',
    'marionette', 'chin', 'jawLine',
]


def basic_inputs():
    return (
        NasolabialAnalyzer().default_result(),     # 65
        CheekAnalyzer().default_result(),          # 70
        WrinkleAnalyzer().default_result(),        # 72
        BoneStructureAnalyzer().default_result(),  # 72
    )


def test_basic_table_four_factor_total():
    result = SkinAgeScorer('basic').calculate(*basic_inputs())
    # 65*.28 + 70*.28 + 72*.22 + 72*.22 = 69.48
    assert result.total_score == 69
    assert result.weight_table == 'basic'
    assert (result.age_range.min, result.age_range.max) == (35, 42)
    assert result.grade.label == 'B'


def test_standard_table_with_all_defaults():
    result = SkinAgeScorer('standard').calculate(None, None, None, None)
    assert result.total_score == 70
    assert result.bone_factor == 25
    assert result.skin_factor == 75


def test_default_table_comes_from_config():
    assert SkinAgeScorer().table.name == 'standard'


def test_unknown_weight_table():
    with pytest.raises(ValueError):
        SkinAgeScorer('premium')


@pytest.mark.parametrize('name', ['standard', 'basic'])
def test_weight_tables_sum_to_one(name):
    table = get_weight_table(name)
    assert sum(table.weights_for().values()) == pytest.approx(1.0)
    assert sum(table.weights_for('male').values()) == pytest.approx(1.0)


def test_male_adjustment_standard_only():
    standard = get_weight_table('standard').weights_for('male')
    assert standard['bone'] == pytest.approx(0.11)
    assert standard['eyelid'] == pytest.approx(0.06)
    assert standard['crowFeet'] == pytest.approx(0.11)
    assert standard['cheek'] == pytest.approx(0.13)
    assert get_weight_table('basic').weights_for('male') == WEIGHT_TABLES['basic']


def test_weight_table_rejects_bad_sum():
    with pytest.raises(ValueError):
        WeightTable('broken', {'nasolabial': 0.5, 'bone': 0.4}, BASIC_EXTRACTORS)


def test_weight_table_rejects_unknown_factor():
    with pytest.raises(ValueError):
        WeightTable('broken', {'forehead': 1.0}, BASIC_EXTRACTORS)


@pytest.mark.parametrize('score, age, grade', [
    (95, (18, 23), 'A'),
    (90, (18, 23), 'A'),
    (82, (24, 28), 'A'),
    (81, (29, 34), 'B'),
    (74, (29, 34), 'B'),
    (68, (35, 42), 'B'),
    (65, (35, 42), 'C'),
    (54, (43, 50), 'C'),
    (45, (51, 58), 'D'),
    (40, (59, 70), 'D'),
    (10, (59, 70), 'E'),
])
def test_age_range_and_grade_thresholds(score, age, grade):
    age_range = score_to_age_range(score)
    assert (age_range.min, age_range.max) == age
    assert score_to_grade(score).label == grade


@pytest.mark.parametrize('age_value, diff, verdict', [
    (45, 7, 'younger'),
    (40, 2, 'younger'),
    (39, 1, 'about_right'),
    (38, 0, 'about_right'),
    (37, -1, 'about_right'),
    (30, -8, 'older'),
])
def test_relative_age(age_value, diff, verdict):
    rel = compare_age(AgeRange(35, 42), UserProfile(age_value=age_value, age_label='late 30s'))
    assert rel.diff == diff
    assert rel.verdict == verdict
    assert rel.age_midpoint == 39
    assert rel.age_label == 'late 30s'


def test_relative_age_absent_without_age():
    assert compare_age(AgeRange(35, 42), None) is None
    assert compare_age(AgeRange(35, 42), UserProfile(gender='female')) is None
    result = SkinAgeScorer().calculate(*basic_inputs())
    assert result.relative_age is None


def test_feature_entries():
    result = SkinAgeScorer().calculate(*basic_inputs(), profile=UserProfile(age_value=40))
    assert [f.key for f in result.features] == FEATURE_ORDER
    for entry in result.features:
        assert 0 <= entry.score <= 100
        assert entry.skin_contrib + entry.bone_contrib == 100
    assert result.feature('glabellar').skin_contrib == 92
    assert result.feature('jawLine').score == 68
    assert result.feature('chin').future
    assert result.feature('missing') is None
    assert result.relative_age is not None


def test_result_to_dict_contract():
    data = SkinAgeScorer().calculate(*basic_inputs(), profile=UserProfile(age_value=40)).to_dict()
    assert data['skinFactor'] == 100 - data['boneFactor']
    assert len(data['features']) == 11
    assert set(data['rawData']) == {'nasolabial', 'cheek', 'wrinkle', 'bone', 'marionette', 'chin'}
    assert data['rawData']['cheek']['sagScore'] == 70
    assert data['relAge']['ageValue'] == 40
