"""얼굴 랜드마크 인덱스 및 점수 계산 상수 정의

MediaPipe FaceMesh 468 landmarks 기준. 좌/우는 화면(viewer) 기준.
"""

from typing import Dict, List, Tuple

# 얼굴 스케일 / 기본 포인트
FACE_LANDMARKS: Dict[str, int] = {
    'forehead': 10,            # 이마 상단
    'chin': 152,               # 턱 끝
    'nose_tip': 4,             # 코끝
    'nose_bridge': 1,          # 코 다리 하단
    'glabella': 168,           # 미간
    'left_ear': 234,           # 왼쪽 귀 (tragion)
    'right_ear': 454,          # 오른쪽 귀
    'left_eye_outer': 33,      # 왼쪽 눈 외안각
    'left_eye_inner': 133,     # 왼쪽 눈 내안각
    'right_eye_outer': 263,    # 오른쪽 눈 외안각
    'right_eye_inner': 362,    # 오른쪽 눈 내안각
    'left_eye_top': 159,
    'left_eye_bottom': 145,
    'right_eye_top': 386,
    'right_eye_bottom': 374,
    'left_cheekbone': 116,     # 왼쪽 광대
    'right_cheekbone': 345,    # 오른쪽 광대
    'left_jaw': 172,           # 왼쪽 턱선
    'right_jaw': 397,          # 오른쪽 턱선
    'left_mouth': 61,          # 왼쪽 입꼬리
    'right_mouth': 291,        # 오른쪽 입꼬리
    'left_nostril': 49,        # 왼쪽 콧방울
    'right_nostril': 279,      # 오른쪽 콧방울
}

# 볼 영역
CHEEK_REGIONS: Dict[str, List[int]] = {
    'left_upper': [116, 123, 147],
    'left_lower': [192, 207, 213],
    'right_upper': [345, 352, 376],
    'right_lower': [416, 427, 433],
}

# 턱선 / 턱 처짐
CHIN_REGIONS: Dict[str, List[int]] = {
    'jaw_left': [172, 136, 150, 149, 176, 148],
    'jaw_right': [377, 400, 378, 379, 365, 397],
    'submental': [152, 200, 199, 175, 148, 377],
}
CHIN_JAW_WIDTH_POINTS: Tuple[int, int] = (136, 365)

# 마리오네트 라인 (입꼬리 아래 볼살 영역)
JOWL_REGIONS: Dict[str, List[int]] = {
    'left': [136, 150, 149, 176, 148, 171],
    'right': [365, 379, 378, 400, 377, 395],
}

# 팔자주름
NASOLABIAL_LANDMARKS: Dict[str, Dict] = {
    'right': {'nostril': 49, 'mouth': 61, 'fold_mid': 206, 'cheek_ref': [116, 123, 147]},
    'left': {'nostril': 279, 'mouth': 291, 'fold_mid': 426, 'cheek_ref': [345, 352, 376]},
}

# 눈가 주름 / 눈 주변
EYE_REGIONS: Dict[str, List[int]] = {
    'left_crow': [33, 7, 163, 144, 145, 153, 154, 155, 133],
    'right_crow': [263, 249, 390, 373, 374, 380, 381, 382, 362],
    'left_under_eye': [159, 158, 157, 173, 133, 155, 154, 153, 145],
    'right_under_eye': [386, 385, 384, 398, 362, 382, 381, 380, 374],
    'glabella': [9, 8, 168, 107, 336, 55, 285, 193, 417],
    'left_brow': [105, 66, 107],
    'right_brow': [334, 296, 336],
}

# 눈꺼풀 개폐 비율용 (top, bottom, inner, outer)
EYELID_LANDMARKS: Dict[str, Dict[str, int]] = {
    'left_eye': {'top': 159, 'bottom': 145, 'inner': 133, 'outer': 33},
    'right_eye': {'top': 386, 'bottom': 374, 'inner': 362, 'outer': 263},
}

# 종합 점수 가중치 테이블 (각 테이블 합계 = 1.0)
WEIGHT_TABLES: Dict[str, Dict[str, float]] = {
    'standard': {
        'nasolabial': 0.13,
        'marionette': 0.11,
        'chin': 0.10,
        'cheek': 0.14,
        'crowFeet': 0.10,
        'glabellar': 0.10,
        'eyelid': 0.08,
        'bone': 0.09,
        'elasticity': 0.07,
        'underEye': 0.04,
        'smile': 0.04,
    },
    'basic': {
        'nasolabial': 0.28,
        'cheek': 0.28,
        'wrinkle': 0.22,
        'bone': 0.22,
    },
}

# 성별 가중치 보정 (남성: 골격 비중↑, 눈꺼풀 비중↓)
GENDER_WEIGHT_ADJUSTMENTS: Dict[str, Dict[str, Dict[str, float]]] = {
    'standard': {
        'male': {'bone': 0.02, 'eyelid': -0.02, 'crowFeet': 0.01, 'cheek': -0.01},
    },
    'basic': {},
}

# 점수 → 피부 나이 구간 (높은 임계값부터)
AGE_RANGE_TABLE: List[Tuple[int, int, int]] = [
    (90, 18, 23),
    (82, 24, 28),
    (74, 29, 34),
    (65, 35, 42),
    (54, 43, 50),
    (42, 51, 58),
    (0, 59, 70),
]

# 점수 → 등급 (높은 임계값부터)
GRADE_TABLE: List[Tuple[int, str, str, str]] = [
    (82, 'A', 'Remarkably youthful skin', '#2ecc71'),
    (68, 'B', 'Younger than your age', '#27ae60'),
    (54, 'C', 'Age-appropriate skin', '#f39c12'),
    (40, 'D', 'Care will pay off now', '#e67e22'),
    (0, 'E', 'Active care recommended', '#e74c3c'),
]

# 상대 나이 판정 허용 오차 (년)
RELATIVE_AGE_TOLERANCE = 1
