"""Yearly report text and chart data built from photo frame statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .photoframes import PhotoFrameManager, YearlySummary

MONTH_NAMES = (
    "一月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "十一月", "十二月",
)

YEARS_SHOWN = 11


@dataclass
class ChartData:
    """Data for one chart: a title, category names and their values."""

    title: str
    categories: list[str]
    values: list[int]
    series_name: str = ""
    labels: list[str] = field(default_factory=list)


def available_years(today: date) -> list[int]:
    """Return this year and the ten before it, newest first."""
    return [today.year - offset for offset in range(YEARS_SHOWN)]


def generate_report_html(year_label: str, summary: YearlySummary) -> str:
    """Render the summary as the HTML text of the report."""
    parts = [
        f"<h1>{year_label} 年度相框报告</h1>",
        f"<h2>共 {summary.total_frames} 个相框</h2>",
        "<h3>月度分布</h3><ul>",
    ]
    parts.extend(
        f"<li>{name}: {count} 个相框</li>"
        for name, count in zip(MONTH_NAMES, summary.frames_per_month)
        if count > 0
    )
    parts.append("</ul>")
    if summary.keyword_counts:
        parts.append("<h3>热门关键词</h3><ul>")
        parts.extend(
            f"<li>{keyword} (出现 {count} 次)</li>"
            for keyword, count in summary.keyword_counts.items()
        )
        parts.append("</ul>")
    body = "".join(parts)
    return f"<div style='font-family: Arial; padding: 20px;'>{body}</div>"


def monthly_chart(summary: YearlySummary) -> ChartData:
    """Return the bar chart of frames per month."""
    return ChartData(
        title="月度相框数量分布",
        series_name="每月相框数量",
        categories=[f"{month}月" for month in range(1, 13)],
        values=list(summary.frames_per_month),
    )


def keyword_chart(summary: YearlySummary) -> ChartData | None:
    """Return the pie chart of descriptions, or None when there is nothing to show."""
    slices = [(key, count) for key, count in summary.keyword_counts.items() if count > 0]
    if not slices:
        return None
    return ChartData(
        title="关键词分布",
        categories=[key for key, _ in slices],
        values=[count for _, count in slices],
        labels=[f"{key} ({count}次)" for key, count in slices],
    )


class YearlyReport:
    """The report for a frame collection, offered for a range of recent years."""

    def __init__(self, manager: PhotoFrameManager, today: date | None = None) -> None:
        self.manager = manager
        self.today = today if today is not None else date.today()

    def years(self) -> list[int]:
        """Return the years the report can be shown for."""
        return available_years(self.today)

    def html(self, year: int) -> str:
        """Return the HTML report for ``year``."""
        return generate_report_html(str(year), self.manager.yearly_summary(year))

    def charts(self, year: int) -> tuple[ChartData, ChartData | None]:
        """Return the monthly chart and the keyword chart for ``year``."""
        summary = self.manager.yearly_summary(year)
        return monthly_chart(summary), keyword_chart(summary)