"""Learner profile manager.

Profiles are created with defaults for every section the caller leaves
out and updated by deep merge: nested dicts are merged into the matching
nested section, while lists and scalars replace the old value.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, fields, is_dataclass, replace
from datetime import datetime
from typing import Any

from nursing_tutor.learning.models import (
    LearnerProfile,
    LearningStyle,
    PersonalInfo,
    StyleScore,
)

logger = logging.getLogger(__name__)

STRONG_PREFERENCE = 70


class LearnerNotFoundError(KeyError):
    """Raised when an operation needs a profile that was never created."""

    def __init__(self, learner_id: str) -> None:
        self.learner_id = learner_id
        super().__init__(learner_id)

    def __str__(self) -> str:
        return f"Unknown learner: {self.learner_id}"


# Per-style indicators and recommendations, used for style assessment and
# for material/tool suggestions.
LEARNING_STYLES: dict[str, dict[str, list[str]]] = {
    "visual": {
        "indicators": [
            "다이어그램과 차트를 선호",
            "색상과 하이라이트 사용",
            "마인드맵 작성",
            "시각적 메모리 우수",
            "그림과 도표로 이해",
        ],
        "recommendations": [
            "해부학 다이어그램 활용",
            "플로우차트로 간호과정 학습",
            "색상별 노트 분류",
            "비디오 강의 시청",
            "인포그래픽 제작",
        ],
        "effective_materials": [
            "해부학 아틀라스",
            "간호과정 플로우차트",
            "의학 삽화집",
            "시각적 참고서",
            "온라인 비디오 강의",
        ],
        "recommended_tools": [
            "마인드맵 소프트웨어",
            "디지털 노트 앱",
            "색상 코딩 시스템",
            "시각적 암기 카드",
            "3D 해부학 앱",
        ],
    },
    "auditory": {
        "indicators": [
            "설명을 듣는 것을 선호",
            "토론 참여 선호",
            "음성 녹음 활용",
            "리듬감 있는 암기법",
            "구술 설명 선호",
        ],
        "recommendations": [
            "음성 강의 듣기",
            "스터디 그룹 참여",
            "자신만의 설명 녹음",
            "의학 용어 노래로 암기",
            "토론식 학습",
        ],
        "effective_materials": ["팟캐스트 강의", "오디오북", "녹음된 강의", "토론 자료", "음성 가이드"],
        "recommended_tools": [
            "음성 녹음 앱",
            "팟캐스트 플레이어",
            "음성 인식 소프트웨어",
            "온라인 토론 플랫폼",
            "오디오 편집 도구",
        ],
    },
    "kinesthetic": {
        "indicators": [
            "실습과 체험 선호",
            "움직이며 학습",
            "손으로 만지며 이해",
            "실제 경험 중시",
            "시뮬레이션 선호",
        ],
        "recommendations": [
            "실습 중심 학습",
            "시뮬레이션 참여",
            "실제 케이스 스터디",
            "체험형 워크숍",
            "실물 모형 활용",
        ],
        "effective_materials": ["실습 매뉴얼", "시뮬레이션 가이드", "케이스 스터디", "실물 모형", "체험 키트"],
        "recommended_tools": ["가상 시뮬레이터", "실습 도구", "모형 및 마네킹", "체험형 앱", "VR/AR 도구"],
    },
    "reading_writing": {
        "indicators": ["읽기와 쓰기 선호", "노트 필기 중시", "텍스트 분석", "요약 작성", "리스트 만들기"],
        "recommendations": ["상세한 노트 작성", "요약 정리", "키워드 추출", "개념 정리", "체계적 필기"],
        "effective_materials": ["전문 서적", "학술 논문", "가이드라인", "매뉴얼", "체계적 교재"],
        "recommended_tools": [
            "디지털 노트 앱",
            "워드 프로세서",
            "개념 정리 도구",
            "온라인 라이브러리",
            "텍스트 분석 도구",
        ],
    },
}

SPECIALTY_MATERIALS: dict[str, list[str]] = {
    "oncology": ["종양간호학 전문서적", "암환자 간호 케이스 스터디", "화학요법 가이드라인", "종양학 저널 논문"],
    "gene_therapy": ["유전학 기초 교재", "유전자 치료 최신 연구", "분자생물학 참고서", "유전상담 가이드"],
}

SPECIALTY_PREPARATION: dict[str, list[str]] = {
    "oncology": ["종양간호사 자격증 취득", "화학요법 교육 이수", "종양학 학회 참석", "암센터 실습 경험"],
    "gene_therapy": ["유전학 추가 교육", "임상시험 교육 이수", "유전상담 교육 참여", "바이오 기업 인턴십"],
    "clinical_trial": ["GCP 교육 이수", "임상시험 코디네이터 자격증", "연구 방법론 교육", "제약회사 인턴십"],
}

SPECIALTY_SKILLS: dict[str, list[str]] = {
    "oncology": ["화학요법 관리", "통증 관리", "가족 상담", "완화 간호"],
    "gene_therapy": ["유전상담", "분자생물학", "바이오인포매틱스", "윤리적 판단"],
    "clinical_trial": ["프로토콜 관리", "데이터 수집", "규제 준수", "환자 교육"],
}

CERTIFICATIONS: dict[str, dict[str, Any]] = {
    "oncology_nurse": {
        "prerequisites": ["간호사 면허", "종양학 병동 1년 경력"],
        "timeline": "6-12개월",
        "study_resources": ["OCN 시험 가이드", "종양간호학 교재", "온라인 강의"],
    },
    "clinical_research_nurse": {
        "prerequisites": ["간호사 면허", "GCP 교육 이수"],
        "timeline": "3-6개월",
        "study_resources": ["GCP 교육 자료", "임상시험 매뉴얼", "연구 윤리 교육"],
    },
    "genetic_counselor": {
        "prerequisites": ["유전학 학사 학위", "유전상담 석사 과정"],
        "timeline": "2-3년",
        "study_resources": ["유전학 교재", "유전상담 실습", "임상 경험"],
    },
}

NETWORKING: dict[str, list[str]] = {
    "hospital": ["병원 간호사회", "전문 간호사 모임", "의료진 컨퍼런스"],
    "clinic": ["클리닉 운영진 모임", "지역 의료진 네트워크", "환자 안전 위원회"],
    "research": ["연구 간호사 협회", "임상시험 학회", "바이오 헬스케어 네트워크"],
    "education": ["간호 교육자 협회", "학술 세미나", "교육 혁신 포럼"],
}

BASE_TOOLS = ["옵시디언 노트 앱", "스케줄 관리 도구", "진도 추적 앱", "플래시카드 앱"]
DEFAULT_PEAK_TIMES = ["오전 9-11시", "오후 2-4시", "저녁 7-9시"]


def deep_merge(target: Any, updates: dict[str, Any]) -> Any:
    """Return a copy of dataclass ``target`` with ``updates`` merged in.

    Raises TypeError for a key that is not a field of ``target``.
    """
    known = {f.name for f in fields(target)}
    changes: dict[str, Any] = {}
    for key, value in updates.items():
        if key not in known:
            raise TypeError(f"{type(target).__name__} has no field {key!r}")
        current = getattr(target, key)
        if is_dataclass(current) and isinstance(value, dict):
            changes[key] = deep_merge(current, value)
        else:
            changes[key] = value
    return replace(target, **changes)


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


@dataclass
class ScheduleRecommendation:
    optimal_session_duration: int
    recommended_break_intervals: int
    weekly_distribution: dict[str, int]
    peak_performance_times: list[str]


@dataclass
class CareerGuidance:
    specialty_preparation: list[str]
    certification_roadmap: dict[str, dict[str, Any]]
    networking_opportunities: list[str]
    skill_development: list[str]


@dataclass
class PersonalizedRecommendations:
    study_materials: list[str]
    study_schedule: ScheduleRecommendation
    learning_strategies: list[str]
    tools_and_resources: list[str]
    career_guidance: CareerGuidance = field(repr=False)


class ProfileManager:
    def __init__(self) -> None:
        self._profiles: dict[str, LearnerProfile] = {}

    def create_profile(self, data: dict[str, Any] | None = None) -> LearnerProfile:
        """Register a learner, filling every omitted section with defaults.

        ``data`` has the same nested shape as LearnerProfile. The
        ``current_status`` section always starts empty.
        """
        data = dict(data or {})
        data.pop("current_status", None)
        personal = dict(data.pop("personal_info", {}) or {})
        learner_id = personal.pop("id", None) or uuid.uuid4().hex[:12]

        profile = LearnerProfile(personal_info=PersonalInfo(id=learner_id))
        if personal:
            data["personal_info"] = personal
        if data:
            profile = deep_merge(profile, data)

        self._profiles[learner_id] = profile
        logger.info("Created learner profile %s", learner_id)
        return profile

    def get_profile(self, learner_id: str) -> LearnerProfile | None:
        return self._profiles.get(learner_id)

    def require_profile(self, learner_id: str) -> LearnerProfile:
        profile = self._profiles.get(learner_id)
        if profile is None:
            raise LearnerNotFoundError(learner_id)
        return profile

    def update_profile(self, learner_id: str, updates: dict[str, Any]) -> LearnerProfile:
        profile = deep_merge(self.require_profile(learner_id), updates)
        profile.personal_info.last_active = datetime.now()
        self._profiles[learner_id] = profile
        return profile

    # -- learning style -----------------------------------------------------

    def assess_learning_style(self, responses: list[dict[str, Any]]) -> LearningStyle:
        """Turn questionnaire responses into percentage scores per style.

        Each response is ``{"style": <name>, "score": <number>}``; responses
        for unknown styles are ignored.
        """
        totals = dict.fromkeys(LEARNING_STYLES, 0.0)
        for response in responses:
            style = response.get("style")
            if style in totals:
                totals[style] += response.get("score", 0)

        grand_total = sum(totals.values())

        def score(style: str) -> StyleScore:
            percent = round(totals[style] / grand_total * 100) if grand_total else 0
            entry = LEARNING_STYLES[style]
            return StyleScore(
                preference_score=percent,
                effective_materials=list(entry["effective_materials"]),
                recommended_tools=list(entry["recommended_tools"]),
            )

        return LearningStyle(
            visual=score("visual"),
            auditory=score("auditory"),
            kinesthetic=score("kinesthetic"),
            reading_writing=score("reading_writing"),
        )

    # -- recommendations ----------------------------------------------------

    def personalized_recommendations(self, profile: LearnerProfile) -> PersonalizedRecommendations:
        return PersonalizedRecommendations(
            study_materials=self._study_materials(profile),
            study_schedule=self._study_schedule(profile),
            learning_strategies=self._learning_strategies(profile),
            tools_and_resources=self._tools(profile),
            career_guidance=self._career_guidance(profile),
        )

    @staticmethod
    def _strong_styles(profile: LearnerProfile) -> list[StyleScore]:
        return [
            score
            for style in profile.learning_preferences.preferred_learning_style
            for score in style.scores().values()
            if score.preference_score > STRONG_PREFERENCE
        ]

    def _study_materials(self, profile: LearnerProfile) -> list[str]:
        materials = [m for s in self._strong_styles(profile) for m in s.effective_materials]
        for specialty in profile.career_goals.target_specialty:
            materials.extend(SPECIALTY_MATERIALS.get(specialty, []))
        return _unique(materials)

    def _tools(self, profile: LearnerProfile) -> list[str]:
        tools = BASE_TOOLS + [t for s in self._strong_styles(profile) for t in s.recommended_tools]
        return _unique(tools)

    def _learning_strategies(self, profile: LearnerProfile) -> list[str]:
        strategies: list[str] = []
        if profile.background.healthcare_experience > 0:
            strategies += ["기존 경험과 새로운 지식 연결", "실무 경험 기반 사례 분석", "멘토링 프로그램 참여"]
        if profile.learning_preferences.difficulty_preference == "gradual":
            strategies += ["기초부터 단계별 학습", "충분한 연습 시간 확보", "반복 학습 활용"]
        if profile.learning_preferences.interaction_type == "collaborative":
            strategies += ["스터디 그룹 참여", "동료와 지식 공유", "토론식 학습"]
        return strategies

    def _study_schedule(self, profile: LearnerProfile) -> ScheduleRecommendation:
        schedule = profile.learning_preferences.study_schedule

        # Hands-on and reading/writing learners get longer sessions.
        style_adjustment = 0
        for style in profile.learning_preferences.preferred_learning_style:
            if style.kinesthetic.preference_score > STRONG_PREFERENCE:
                style_adjustment += 10
            if style.reading_writing.preference_score > STRONG_PREFERENCE:
                style_adjustment += 5
        experience_adjustment = 15 if profile.background.healthcare_experience > 0 else 0
        duration = max(30, min(120, schedule.session_duration + experience_adjustment + style_adjustment))

        if schedule.preferred_time_slots:
            peaks = [
                f"{slot.day} {slot.start_time}-{slot.end_time}"
                for slot in schedule.preferred_time_slots
                if slot.effectiveness_rating > 7
            ]
        else:
            peaks = list(DEFAULT_PEAK_TIMES)

        return ScheduleRecommendation(
            optimal_session_duration=duration,
            recommended_break_intervals=max(5, min(30, round(duration / 4))),
            weekly_distribution={
                "total_hours": schedule.weekly_hours,
                "sessions_per_week": -(-schedule.weekly_hours // 2),
                "rest_days": 1 if schedule.flexibility == "rigid" else 2,
                "intensive_days": 2 if schedule.flexibility == "adaptive" else 1,
            },
            peak_performance_times=peaks,
        )

    def _career_guidance(self, profile: LearnerProfile) -> CareerGuidance:
        goals = profile.career_goals
        return CareerGuidance(
            specialty_preparation=[p for s in goals.target_specialty for p in SPECIALTY_PREPARATION.get(s, [])],
            certification_roadmap={
                cert: {
                    "prerequisites": CERTIFICATIONS.get(cert, {}).get("prerequisites", []),
                    "timeline": CERTIFICATIONS.get(cert, {}).get("timeline", "6-12개월"),
                    "study_resources": CERTIFICATIONS.get(cert, {}).get("study_resources", []),
                }
                for cert in goals.certification_goals
            },
            networking_opportunities=NETWORKING.get(goals.work_setting, []),
            skill_development=_unique([k for s in goals.target_specialty for k in SPECIALTY_SKILLS.get(s, [])]),
        )
