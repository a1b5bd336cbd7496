"""Curated nursing research literature and per-area evidence digests."""

RESEARCH_STUDIES: dict[str, list[dict]] = {
    "clinical_trial": [
        {
            "title": "Nurse-Led Clinical Trial Management: Best Practices",
            "authors": ["Kim S", "Park J", "Lee H"],
            "year": 2024,
            "journal": "Clinical Trials Nursing",
            "evidence_level": "systematic_review",
            "summary": "간호사 주도 임상시험 관리의 모범 사례 연구",
            "key_findings": ["간호사의 역할 확대", "환자 안전 개선", "프로토콜 준수율 향상"],
        },
        {
            "title": "Genetic Counseling in Oncology Nursing",
            "authors": ["Johnson M", "Smith R"],
            "year": 2023,
            "journal": "Oncology Nursing Forum",
            "evidence_level": "rct",
            "summary": "종양간호에서의 유전상담 역할 연구",
            "key_findings": ["개인 맞춤형 치료 효과", "환자 만족도 증가"],
        },
    ],
    "genetics": [
        {
            "title": "CRISPR-Cas9 Gene Therapy: Nursing Implications",
            "authors": ["Chen L", "Wang Y", "Liu Z"],
            "year": 2024,
            "journal": "Gene Therapy Nursing",
            "evidence_level": "systematic_review",
            "summary": "CRISPR-Cas9 유전자 치료의 간호학적 의미",
            "key_findings": ["유전자 편집 기술 이해", "환자 모니터링 중요성"],
        },
        {
            "title": "Pharmacogenomics in Personalized Medicine",
            "authors": ["Brown A", "Davis K"],
            "year": 2023,
            "journal": "Personalized Medicine Nursing",
            "evidence_level": "rct",
            "summary": "개인 맞춤형 의학에서의 약물유전학",
            "key_findings": ["약물 반응 예측", "부작용 최소화"],
        },
    ],
    "oncology": [
        {
            "title": "Immunotherapy Nursing: Current Practices and Future Directions",
            "authors": ["Miller J", "Wilson T", "Garcia M"],
            "year": 2024,
            "journal": "Cancer Nursing",
            "evidence_level": "systematic_review",
            "summary": "면역치료 간호의 현재와 미래",
            "key_findings": ["면역 관련 부작용 관리", "환자 교육 중요성"],
        },
        {
            "title": "CAR-T Cell Therapy: Nursing Care Considerations",
            "authors": ["Thompson R", "Anderson L"],
            "year": 2023,
            "journal": "Hematology Nursing",
            "evidence_level": "case_study",
            "summary": "CAR-T 세포 치료의 간호 고려사항",
            "key_findings": ["감염 관리", "신경독성 모니터링"],
        },
    ],
}

# {query} is substituted with the caller's search text.
AREA_SUMMARIES: dict[str, str] = {
    "clinical_trial": (
        '임상시험 분야에서 "{query}"에 대한 최신 연구 동향을 분석한 결과, '
        "간호사의 역할이 점차 확대되고 있으며, 환자 안전과 치료 효과 향상에 "
        "중요한 기여를 하고 있습니다."
    ),
    "genetics": (
        '유전학 분야에서 "{query}"와 관련된 연구들은 개인 맞춤형 치료의 중요성과 '
        "유전자 기반 치료법의 발전을 강조하고 있습니다."
    ),
    "oncology": (
        '종양학 분야에서 "{query}"에 대한 연구들은 새로운 치료법 개발과 함께 '
        "간호사의 전문성 강화 필요성을 보여주고 있습니다."
    ),
}

KEY_FINDINGS: dict[str, list[str]] = {
    "clinical_trial": [
        "간호사 주도 임상시험 관리의 효과성 입증",
        "환자 안전 및 프로토콜 준수율 향상",
        "다학제 팀 접근법의 중요성 강조",
        "데이터 품질 관리에서의 간호사 역할 확대",
    ],
    "genetics": [
        "유전자 기반 개인 맞춤형 치료의 효과성",
        "유전상담에서의 간호사 역할 중요성",
        "약물유전학 지식의 실무 적용 필요성",
        "윤리적 고려사항 및 환자 교육 중요성",
    ],
    "oncology": [
        "면역치료 및 표적치료의 간호 관리",
        "환자 맞춤형 부작용 관리 전략",
        "생존율 향상 및 삶의 질 개선",
        "가족 지지 및 심리적 간호의 중요성",
    ],
}

CLINICAL_IMPLICATIONS: dict[str, list[str]] = {
    "clinical_trial": [
        "간호사 교육 프로그램 강화 필요",
        "임상시험 관리 시스템 개선",
        "환자 안전 모니터링 프로토콜 표준화",
        "연구 윤리 교육 확대",
    ],
    "genetics": [
        "유전학 지식 기반 간호 교육 필요",
        "유전상담 스킬 개발 프로그램 도입",
        "개인정보 보호 및 윤리적 고려사항 교육",
        "가족력 평가 및 관리 체계 구축",
    ],
    "oncology": [
        "전문 간호사 양성 프로그램 확대",
        "최신 치료법에 대한 지속적 교육",
        "환자 및 가족 지지 시스템 강화",
        "증상 관리 프로토콜 개발",
    ],
}

NURSING_CONSIDERATIONS: dict[str, list[str]] = {
    "clinical_trial": [
        "연구 프로토콜 철저한 이해 및 준수",
        "환자 동의서 과정에서의 간호사 역할",
        "이상 반응 조기 발견 및 보고",
        "환자 교육 및 지지 제공",
    ],
    "genetics": [
        "유전자 검사 전후 상담 및 교육",
        "가족력 수집 및 분석 능력",
        "개인정보 보호 및 비밀유지",
        "윤리적 딜레마 상황 대처",
    ],
    "oncology": [
        "치료 부작용 조기 발견 및 관리",
        "환자 및 가족의 심리적 지지",
        "통증 관리 및 완화 간호",
        "말기 환자 돌봄 및 호스피스 간호",
    ],
}

RECOMMENDATIONS: dict[str, list[str]] = {
    "clinical_trial": [
        "임상시험 간호사 인증 프로그램 도입",
        "표준화된 교육 커리큘럼 개발",
        "연구 질 관리 시스템 구축",
        "국제 협력 네트워크 구축",
    ],
    "genetics": [
        "유전간호 전문가 양성 과정 신설",
        "유전상담 실무 가이드라인 개발",
        "윤리 위원회 설치 및 운영",
        "가족 중심 간호 프로그램 확대",
    ],
    "oncology": [
        "종양간호 전문가 자격 제도 확립",
        "최신 치료법 교육 프로그램 운영",
        "환자 안전 관리 체계 강화",
        "생존자 관리 프로그램 개발",
    ],
}

FUTURE_RESEARCH: dict[str, list[str]] = {
    "clinical_trial": [
        "디지털 헬스케어 기술 활용 연구",
        "환자 참여도 향상 방안 연구",
        "글로벌 임상시험 관리 모델 개발",
        "AI 기반 데이터 분석 시스템 연구",
    ],
    "genetics": [
        "유전자 편집 기술의 안전성 연구",
        "개인 맞춤형 치료법 개발",
        "유전적 다양성 고려한 치료법 연구",
        "윤리적 가이드라인 개발 연구",
    ],
    "oncology": [
        "면역치료 최적화 연구",
        "정밀의료 기반 치료법 개발",
        "생존자 삶의 질 향상 연구",
        "예방적 간호 중재 효과 연구",
    ],
}
