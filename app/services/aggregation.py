"""차트 집계 함수 — 이슈 레코드를 차트 데이터로 변환.

Chart aggregation functions — Reshape issue records into chart-ready payloads.

The functions only read the records they are given and never touch the store;
apart from the random timeline line colors their output depends on nothing else.
Two payload shapes are produced:

    {"labels": [...], "data": [...]}        severity / status breakdowns
    {"labels": [...], "datasets": [...]}    resolution timeline / assignee throughput

Grouping keeps first-seen order, so label order follows the order in which the
store returned the records. Consumers must not rely on it.

The breakdowns only list values that occur; the assignee throughput reports an
explicit 0 for a status an assignee has no issues in.
"""

import random
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Iterable, Protocol

from app.models.issue import IssueStatus

# 처리량 차트 고정 색상 — Fixed colors of the throughput bar chart
RESOLVED_BACKGROUND = "rgba(75, 192, 192, 0.5)"
RESOLVED_BORDER = "rgb(75, 192, 192)"
NEW_BACKGROUND = "rgba(255, 99, 132, 0.5)"
NEW_BORDER = "rgb(255, 99, 132)"


class IssueRecord(Protocol):
    """집계에 필요한 이슈 필드 (Fields the aggregations read from an issue)."""

    assignee: str
    severity: str
    status: str
    updated_at: datetime


# ---------------------------------------------------------------------------
# 공통 헬퍼 — Shared helpers
# ---------------------------------------------------------------------------

def _value(raw: Any) -> Any:
    # enum 멤버는 값으로 변환 (Enum members are reported by their value)
    return getattr(raw, "value", raw)


def count_by(records: Iterable[IssueRecord], attr: str) -> dict[Any, int]:
    """속성 값별 레코드 수 — 처음 나타난 순서 유지 (Counts per value, first-seen order)."""
    counts: dict[Any, int] = {}
    for record in records:
        key = _value(getattr(record, attr))
        counts[key] = counts.get(key, 0) + 1
    return counts


def day_key(timestamp: datetime) -> tuple[int, int, int]:
    """UTC 기준 (연, 월, 일) 튜플.

    Naive timestamps (e.g. read back from SQLite) are taken as UTC.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    else:
        timestamp = timestamp.astimezone(timezone.utc)
    return timestamp.year, timestamp.month, timestamp.day


def format_day(year: int, month: int, day: int) -> str:
    """'YYYY-MM-DD' — 월/일 0 패딩 (zero-padded month and day)."""
    return f"{year}-{month:02d}-{day:02d}"


def random_color() -> str:
    """임의의 선 색상 'rgb(r, g, b)' — 각 성분 0..254."""
    r, g, b = (random.randint(0, 254) for _ in range(3))
    return f"rgb({r}, {g}, {b})"


def _distinct_colors(count: int) -> list[str]:
    colors: list[str] = []
    while len(colors) < count:
        color = random_color()
        if color not in colors:
            colors.append(color)
    return colors


def _breakdown(records: Iterable[IssueRecord], attr: str) -> dict[str, list]:
    counts = count_by(records, attr)
    return {"labels": list(counts.keys()), "data": list(counts.values())}


# ---------------------------------------------------------------------------
# 차트 변환 — Chart transforms
# ---------------------------------------------------------------------------

def severity_breakdown(records: Iterable[IssueRecord]) -> dict[str, list]:
    """심각도별 이슈 수 (Issue count per severity present in the data)."""
    return _breakdown(records, "severity")


def status_breakdown(records: Iterable[IssueRecord]) -> dict[str, list]:
    """상태별 이슈 수 (Issue count per status present in the data)."""
    return _breakdown(records, "status")


def resolution_timeline(records: Iterable[IssueRecord]) -> dict[str, list]:
    """담당자별 일자별 해결 건수 — 선 차트 데이터.

    Resolution timeline: per assignee, the number of issues resolved on each
    calendar day (UTC day of ``updated_at``). Records that are not resolved
    are skipped.

    Returns:
        dict: {
            "labels": 모든 담당자의 날짜 합집합, 오름차순 (Union of all dates, ascending),
            "datasets": [{"label": 담당자, "data": [{"x": "YYYY-MM-DD", "y": count}, ...],
                          "color": "rgb(...)", "borderColor": "rgb(...)", "fill": False}, ...],
        }
    """
    # 1차 그룹화: 담당자 → 일자 → 건수 (assignee → day → count)
    per_assignee: dict[str, dict[tuple[int, int, int], int]] = {}
    for record in records:
        if _value(record.status) != IssueStatus.RESOLVED.value:
            continue
        days = per_assignee.setdefault(record.assignee, defaultdict(int))
        days[day_key(record.updated_at)] += 1

    labels: set[str] = set()
    datasets: list[dict[str, Any]] = []
    colors = _distinct_colors(len(per_assignee))

    for (assignee, days), color in zip(per_assignee.items(), colors):
        points: list[dict[str, Any]] = []
        for year, month, day in sorted(days):
            x = format_day(year, month, day)
            labels.add(x)
            points.append({"x": x, "y": days[(year, month, day)]})
        datasets.append({
            "label": assignee,
            "data": points,
            "color": color,
            "borderColor": color,
            "fill": False,
        })

    return {"labels": sorted(labels), "datasets": datasets}


def assignee_throughput(records: Iterable[IssueRecord]) -> dict[str, list]:
    """담당자별 해결/신규 건수 — 막대 차트 데이터.

    Every assignee with at least one issue appears once in ``labels``; the
    "Resolved" and "New" datasets are index-aligned with it and report 0
    where an assignee has no issues of that status.
    """
    resolved: dict[str, int] = {}
    new: dict[str, int] = {}
    for record in records:
        status = _value(record.status)
        resolved.setdefault(record.assignee, 0)
        new.setdefault(record.assignee, 0)
        if status == IssueStatus.RESOLVED.value:
            resolved[record.assignee] += 1
        elif status == IssueStatus.NEW.value:
            new[record.assignee] += 1

    labels = list(resolved.keys())
    return {
        "labels": labels,
        "datasets": [
            {
                "label": "Resolved",
                "data": [resolved[name] for name in labels],
                "backgroundColor": RESOLVED_BACKGROUND,
                "borderColor": RESOLVED_BORDER,
                "borderWidth": 1,
            },
            {
                "label": "New",
                "data": [new[name] for name in labels],
                "backgroundColor": NEW_BACKGROUND,
                "borderColor": NEW_BORDER,
                "borderWidth": 1,
            },
        ],
    }
