"""Lab value interpretation.

Normal ranges and critical thresholds are stored as report text
("13.5-17.5 g/dL", "<2,000 cells/μL"). Numbers are pulled out with a
regular expression after thousands separators are removed. When the text
cannot be parsed the functions say so instead of guessing a bound.
"""

from __future__ import annotations

import logging
import re

from nursing_tutor.models import LabValue

logger = logging.getLogger(__name__)

_THOUSANDS_SEPARATOR = re.compile(r"(?<=\d),(?=\d{3})")
_RANGE_PATTERN = re.compile(r"(\d+\.?\d*)-(\d+\.?\d*)")
_NUMBER_PATTERN = re.compile(r"(\d+\.?\d*)")

LAB_NOT_FOUND = "검사 정보를 찾을 수 없습니다."
RANGE_UNAVAILABLE = "정상 범위를 확인할 수 없습니다."


def _strip_separators(text: str) -> str:
    return _THOUSANDS_SEPARATOR.sub("", text)


def parse_range(range_text: str) -> tuple[float, float] | None:
    """Return ``(low, high)`` from the first ``a-b`` pair in the text."""
    match = _RANGE_PATTERN.search(_strip_separators(range_text))
    if not match:
        return None
    return float(match.group(1)), float(match.group(2))


def parse_threshold(threshold_text: str) -> float | None:
    """Return the leading number of a critical threshold such as ``<7.0 g/dL``."""
    match = _NUMBER_PATTERN.search(_strip_separators(threshold_text))
    return float(match.group(1)) if match else None


def select_range(lab: LabValue, gender: str | None = None) -> str | None:
    """Pick the adult range: the general one, else the one for ``gender``."""
    adult = lab.normal_range.adult
    if adult.general:
        return adult.general
    if gender == "male":
        return adult.male
    if gender == "female":
        return adult.female
    return None


def interpret_lab_value(lab: LabValue | None, value: float, gender: str | None = None) -> str:
    """Classify ``value`` as 낮음 / 정상 / 높음 against the lab's normal range."""
    if lab is None:
        return LAB_NOT_FOUND

    range_text = select_range(lab, gender)
    if not range_text:
        return RANGE_UNAVAILABLE

    bounds = parse_range(range_text)
    if bounds is None:
        return f"{RANGE_UNAVAILABLE} ({range_text})"

    low, high = bounds
    if value < low:
        return f"낮음 (정상: {range_text})"
    if value > high:
        return f"높음 (정상: {range_text})"
    return f"정상 ({range_text})"


def critical_alerts(lab: LabValue | None, value: float) -> list[str]:
    """Warnings for every critical threshold ``value`` breaches.

    The low and high thresholds are checked independently of each other.
    """
    if lab is None:
        return []

    alerts: list[str] = []
    critical = lab.critical_values

    if critical.low:
        low = parse_threshold(critical.low)
        if low is None:
            logger.debug("Unparseable critical low for %s: %r", lab.id, critical.low)
        elif value < low:
            alerts.append(f"⚠️ 위험: {lab.name_korean} 수치가 매우 낮습니다 ({value} {lab.unit})")

    if critical.high:
        high = parse_threshold(critical.high)
        if high is None:
            logger.debug("Unparseable critical high for %s: %r", lab.id, critical.high)
        elif value > high:
            alerts.append(f"⚠️ 위험: {lab.name_korean} 수치가 매우 높습니다 ({value} {lab.unit})")

    return alerts
