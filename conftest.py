"""pytest 공용 fixture: 합성 468점 얼굴 랜드마크"""

import pytest

from skin_age_analyzer.models import Landmark, Pose, Session

NUM_LANDMARKS = 468

# 화면 640x480 기준, 얼굴 높이 300px의 정면 얼굴 (z = 0 평면)
FACE_POINTS = {
    10: (320, 100, 0),     # 이마
    152: (320, 400, 0),    # 턱 끝
    4: (320, 260, 0),      # 코끝
    234: (200, 230, 0),    # 귀
    454: (440, 230, 0),
    172: (236, 330, 0),    # 턱선
    397: (404, 330, 0),
    116: (230, 220, 0),    # 광대
    345: (410, 220, 0),
    33: (260, 200, 0),     # 눈
    133: (300, 200, 0),
    362: (340, 200, 0),
    263: (380, 200, 0),
    159: (280, 190, 0),
    145: (280, 210, 0),
    386: (360, 190, 0),
    374: (360, 210, 0),
    61: (285, 320, 0),     # 입꼬리
    291: (355, 320, 0),
    49: (300, 275, 0),     # 콧방울
    279: (340, 275, 0),
    136: (250, 350, 0),    # 턱 너비 기준점
    365: (390, 350, 0),
}
DEFAULT_POINT = (320, 250, 0)

LOWER_CHEEK = [192, 207, 213, 416, 427, 433]


def build_face(overrides=None, scale=1.0, count=NUM_LANDMARKS):
    """
    합성 얼굴 랜드마크 생성

    Args:
        overrides: {index: (x, y, z)} 덮어쓸 좌표
        scale: 모든 좌표에 곱할 배율
        count: 포인트 개수
    """
    points = dict(FACE_POINTS)
    points.update(overrides or {})
    landmarks = []
    for i in range(count):
        x, y, z = points.get(i, DEFAULT_POINT)
        landmarks.append(Landmark(x=x * scale, y=y * scale, z=z * scale))
    return landmarks


def shift_y(landmarks, indices, dy):
    """지정 포인트들의 y를 dy만큼 이동한 복사본"""
    moved = list(landmarks)
    for i in indices:
        p = moved[i]
        moved[i] = Landmark(x=p.x, y=p.y + dy, z=p.z)
    return moved


@pytest.fixture
def face():
    return build_face()


@pytest.fixture
def make_face():
    return build_face


@pytest.fixture
def session(face):
    return Session().add(Pose.NEUTRAL, face).add(Pose.SMILE, list(face)).add(Pose.DOWN, list(face))
