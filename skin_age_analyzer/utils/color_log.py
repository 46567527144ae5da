# -*- coding: utf-8 -*-
"""
Color Log Utility for Clean Console Output
CLI 분석 요약을 컬러로 출력하는 유틸리티
"""

from datetime import datetime


class ColorLog:
    """
    컬러 로그 유틸리티

    Features:
    - 타임스탬프 자동 추가
    - 이모지 + 컬러로 가시성 향상
    - 부위별 점수 한 줄 출력
    """

    # ANSI 색상 코드
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    MAGENTA = '\033[95m'
    RESET = '\033[0m'
    BOLD = '\033[1m'

    @staticmethod
    def timestamp() -> str:
        """현재 시간 반환 (HH:MM:SS 형식)"""
        return datetime.now().strftime("%H:%M:%S")

    @staticmethod
    def success(msg: str):
        """성공 메시지 (초록색 + ✅)"""
        print(f"{ColorLog.GREEN}✅ [{ColorLog.timestamp()}] {msg}{ColorLog.RESET}")

    @staticmethod
    def info(msg: str):
        """정보 메시지 (파란색 + ℹ️)"""
        print(f"{ColorLog.BLUE}ℹ️  [{ColorLog.timestamp()}] {msg}{ColorLog.RESET}")

    @staticmethod
    def warning(msg: str):
        """경고 메시지 (노란색 + ⚠️)"""
        print(f"{ColorLog.YELLOW}⚠️  [{ColorLog.timestamp()}] {msg}{ColorLog.RESET}")

    @staticmethod
    def error(msg: str):
        """에러 메시지 (빨간색 + ❌)"""
        print(f"{ColorLog.RED}❌ [{ColorLog.timestamp()}] {msg}{ColorLog.RESET}")

    @staticmethod
    def analysis(msg: str):
        """분석 메시지 (마젠타 + 🔍)"""
        print(f"{ColorLog.MAGENTA}🔍 [{ColorLog.timestamp()}] {msg}{ColorLog.RESET}")

    @staticmethod
    def separator():
        """구분선 출력"""
        print(f"{ColorLog.BLUE}{'─' * 80}{ColorLog.RESET}")

    @staticmethod
    def header(title: str):
        """헤더 출력 (굵게)"""
        print(f"\n{ColorLog.BOLD}{ColorLog.CYAN}═══ {title} ═══{ColorLog.RESET}\n")

    @staticmethod
    def score_color(score: int) -> str:
        """점수 구간별 색상 (75 이상 초록, 55 이상 노랑, 그 외 빨강)"""
        if score >= 75:
            return ColorLog.GREEN
        if score >= 55:
            return ColorLog.YELLOW
        return ColorLog.RED

    @staticmethod
    def score_line(icon: str, name: str, score: int, label: str):
        """
        부위별 점수 한 줄 출력

        Args:
            icon: 부위 아이콘
            name: 부위 이름
            score: 점수 (0-100)
            label: 심각도 라벨
        """
        color = ColorLog.score_color(score)
        print(f"   {icon} {name:<22} {color}{score:>3}{ColorLog.RESET}  {label}")
