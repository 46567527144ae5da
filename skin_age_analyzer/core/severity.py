"""점수 → 심각도 구간 분류"""

from typing import Dict, List, Tuple

from ..models.analysis_models import Severity


class SeverityScale:
    """
    4단계 심각도 척도

    thresholds는 내림차순 3개 (예: 80, 65, 45). 점수가 처음으로 이상이 되는
    구간이 선택되고, 모두 미만이면 마지막 구간.
    """

    def __init__(self, bands: List[Tuple[float, str, str]]):
        """
        Args:
            bands: [(threshold, label, color), ...] 4개, threshold 내림차순.
                   마지막 구간의 threshold는 무시됨.
        """
        if len(bands) != 4:
            raise ValueError(f"SeverityScale needs exactly 4 bands, got {len(bands)}")
        thresholds = [b[0] for b in bands[:3]]
        if thresholds != sorted(thresholds, reverse=True):
            raise ValueError(f"Severity thresholds must be descending: {thresholds}")
        self.bands = bands

    def classify(self, score: float) -> Severity:
        """점수를 심각도로 변환"""
        for level, (threshold, label, color) in enumerate(self.bands[:3]):
            if score >= threshold:
                return Severity(label=label, color=color, level=level)
        _, label, color = self.bands[3]
        return Severity(label=label, color=color, level=3)


GREEN, DARK_GREEN, BLUE = '#2ecc71', '#27ae60', '#3498db'
YELLOW, ORANGE, RED = '#f39c12', '#e67e22', '#e74c3c'

SEVERITY_SCALES: Dict[str, SeverityScale] = {
    # 분석기 자체 척도
    'bone': SeverityScale([
        (80, 'Well-balanced structure', BLUE),
        (65, 'Typical', GREEN),
        (50, 'Some change', YELLOW),
        (0, 'Noticeable structural change', ORANGE),
    ]),
    'cheek': SeverityScale([
        (80, 'Firm', GREEN),
        (65, 'Slightly loose', YELLOW),
        (45, 'Sagging', ORANGE),
        (0, 'Clearly sagging', RED),
    ]),
    'chin': SeverityScale([
        (80, 'Sharp', GREEN),
        (65, 'Slightly rounded', DARK_GREEN),
        (48, 'Sagging', YELLOW),
        (0, 'Needs care', RED),
    ]),
    'marionette': SeverityScale([
        (80, 'Barely visible', GREEN),
        (65, 'Shallow', YELLOW),
        (48, 'Defined', ORANGE),
        (0, 'Deep', RED),
    ]),
    'nasolabial': SeverityScale([
        (80, 'Barely noticeable', GREEN),
        (65, 'Slightly visible', YELLOW),
        (45, 'Moderate', ORANGE),
        (0, 'Clearly visible', RED),
    ]),
    'wrinkle': SeverityScale([
        (80, 'Almost none', GREEN),
        (65, 'Fine lines', YELLOW),
        (45, 'Visible wrinkles', ORANGE),
        (0, 'Deep wrinkles', RED),
    ]),
    # 종합 화면용 부위별 척도
    'generic': SeverityScale([
        (80, 'Excellent', GREEN),
        (65, 'Good', DARK_GREEN),
        (48, 'Watch', YELLOW),
        (0, 'Needs care', RED),
    ]),
    'glabellar': SeverityScale([
        (80, 'Smooth', GREEN),
        (65, 'Shallow', YELLOW),
        (48, 'Defined', ORANGE),
        (0, 'Deep', RED),
    ]),
    'eyelid': SeverityScale([
        (80, 'Wide open', GREEN),
        (65, 'Slightly heavy', DARK_GREEN),
        (48, 'Drooping lids', YELLOW),
        (0, 'Hooded', RED),
    ]),
    'elasticity': SeverityScale([
        (80, 'Firm', GREEN),
        (65, 'Elastic', DARK_GREEN),
        (48, 'Reduced elasticity', YELLOW),
        (0, 'Much reduced', RED),
    ]),
    'under_eye': SeverityScale([
        (80, 'Clear', GREEN),
        (65, 'Slight shadows', DARK_GREEN),
        (48, 'Dull', YELLOW),
        (0, 'Needs care', RED),
    ]),
    'jaw': SeverityScale([
        (80, 'Sharp', BLUE),
        (65, 'Typical', GREEN),
        (48, 'Slightly rounded', YELLOW),
        (0, 'Blurred contour', ORANGE),
    ]),
}

# 턱 처짐 향후 전망 (chin 척도와 같은 구간)
CHIN_FUTURE_OUTLOOK: List[Tuple[float, str]] = [
    (80, 'Low sagging risk'),
    (65, 'Worth watching over the next few years'),
    (48, 'Sagging in progress'),
    (0, 'Early care recommended'),
]


def get_severity(scale: str, score: float) -> Severity:
    """이름으로 척도를 골라 심각도 반환"""
    return SEVERITY_SCALES[scale].classify(score)


def chin_future(score: float) -> str:
    """턱 처짐 점수 → 향후 전망 문구"""
    for threshold, text in CHIN_FUTURE_OUTLOOK:
        if score >= threshold:
            return text
    return CHIN_FUTURE_OUTLOOK[-1][1]
