#!/usr/bin/env python3
"""
피부 나이 분석 실행 스크립트

사용 예:
    skin-age-analyze --session session.json --output report.json
    skin-age-analyze --neutral front.jpg --smile smile.jpg --down down.jpg --age 38 --gender female
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .core.skin_age_analyzer import SkinAgeAnalyzer
from .core.skin_age_scorer import SkinAgeScorer
from .models.analysis_models import SkinAgeResult, UserProfile
from .models.landmark_models import Pose
from .utils import (
    ColorLog,
    SkinAgeAnalyzerException,
    build_improvement_tiers,
    get_config,
    get_logger,
    load_session_json,
    save_json,
)

logger = get_logger(__name__)


def print_summary(result: SkinAgeResult, threshold: int):
    """분석 결과 요약 출력"""
    ColorLog.header("Skin Age Analysis")

    color = ColorLog.score_color(result.total_score)
    print(f"   Total score : {color}{ColorLog.BOLD}{result.total_score}{ColorLog.RESET} / 100")
    print(f"   Skin age    : {result.age_range.min}-{result.age_range.max}")
    print(f"   Grade       : {result.grade.label} ({result.grade.text})")
    print(f"   Bone / Skin : {result.bone_factor}% / {result.skin_factor}%")

    if result.relative_age:
        rel = result.relative_age
        print(f"   Actual age  : {rel.age_value} (diff {rel.diff:+d}, {rel.verdict})")

    ColorLog.separator()
    for feature in result.features:
        ColorLog.score_line(feature.icon, feature.name, feature.score, feature.severity.label)
    ColorLog.separator()

    tiers = build_improvement_tiers(result.features, threshold)
    if not tiers:
        ColorLog.success("Great scores. Keep up your current routine.")
        return

    print(f"\n{ColorLog.BOLD}💡 Improvement advice{ColorLog.RESET}")
    for tier in tiers:
        print(f"   [{tier['label']}] {', '.join(tier['items'])}")
        print(f"      ⌛ {tier['timeline']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='MediaPipe 랜드마크 기반 피부 나이 분석')

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--session', help='랜드마크 세션 JSON 파일 (neutral/smile/down)')
    source.add_argument('--neutral', help='정면 무표정 이미지')

    parser.add_argument('--smile', help='정면 미소 이미지 (--neutral과 함께 사용)')
    parser.add_argument('--down', help='아래 보기 이미지 (--neutral과 함께 사용)')
    parser.add_argument('--age', type=int, help='실제 나이 (상대 나이 비교용)')
    parser.add_argument('--age-label', help='표시용 나이 라벨')
    parser.add_argument('--gender', choices=['male', 'female'], help='성별 (가중치 보정)')
    parser.add_argument(
        '--weight-table',
        choices=['standard', 'basic'],
        help='가중치 테이블 (기본: config의 scoring.weight_table)'
    )
    parser.add_argument(
        '--output',
        default='skin_age_report.json',
        help='리포트 저장 파일 (기본: skin_age_report.json)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.session and (args.smile or args.down):
        parser.error('--smile/--down can only be used with --neutral')

    threshold = int(get_config().get('scoring.improvement_threshold', 75))

    try:
        analyzer = SkinAgeAnalyzer(scorer=SkinAgeScorer(args.weight_table))

        if args.session:
            ColorLog.info(f"Loading session: {args.session}")
            session, profile = load_session_json(args.session)
            source = args.session
        else:
            from .core.mediapipe import load_image

            ColorLog.info(f"Detecting landmarks: {args.neutral}")
            images = [load_image(p) if p else None for p in (args.neutral, args.smile, args.down)]
            profile = None
            source = args.neutral

        # 명령줄 프로필이 파일의 프로필보다 우선
        if args.age is not None or args.age_label or args.gender:
            base = profile or UserProfile()
            profile = UserProfile(
                age_value=args.age if args.age is not None else base.age_value,
                age_label=args.age_label or base.age_label,
                gender=args.gender or base.gender,
            )

        if args.session:
            missing = [p.value for p in (Pose.SMILE, Pose.DOWN) if session.landmarks_for(p) is None]
        else:
            missing = [name for name, img in (('smile', images[1]), ('down', images[2])) if img is None]
        if missing:
            ColorLog.warning(f"Missing poses ({', '.join(missing)}): related metrics use fallback values")

        ColorLog.analysis("Running feature analyzers...")
        if args.session:
            result = analyzer.analyze_session(session, profile)
        else:
            result = analyzer.analyze_images(*images, profile=profile)

    except SkinAgeAnalyzerException as e:
        logger.error(f"Analysis failed: {e}")
        ColorLog.error(str(e))
        return 1

    print_summary(result, threshold)

    output_path = Path(args.output)
    save_json(result, str(output_path), threshold=threshold, source=source)
    ColorLog.success(f"Report saved: {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
