from typing import Dict

from aggregation import segment_campaign_count, stage_count, total_campaigns
from campaign_config import STAGES, get_report_icon
from markup import data_attrs, h
from tree_state import TreeState

DISABLED_STAGE_COLOR = "#9CA3AF"


def render_tree(dataset: Dict, tree_state: TreeState) -> str:
    """Renders every report of the dataset as the navigable tree."""
    reports = (dataset or {}).get("reports") or []
    rows = "".join(render_report(report, tree_state) for report in reports)
    return f'<div class="tree">{rows}</div>'


def _chevron(expanded: bool) -> str:
    return '<span class="chevron">▾</span>' if expanded else '<span class="chevron">▸</span>'


def render_report(report: Dict, tree_state: TreeState) -> str:
    report_id = report.get("id")
    expanded = tree_state.is_report_expanded(report_id)
    segments = report.get("segments") or []
    total = total_campaigns(segments)

    header = f"""
        <div class="report-header" {data_attrs(action="toggle_report", report_id=report_id)} style="background-color: {h(report.get('color'))};">
            <div class="report-title">
                {_chevron(expanded)}
                <div class="report-icon">{get_report_icon(report_id)}</div>
                <div>
                    <h2>{h(report.get('name'))}</h2>
                    <p>{h(report.get('description'))}</p>
                </div>
            </div>
            <div class="report-total">
                <div class="report-total-value">{total}</div>
                <div class="report-total-label">total campaigns</div>
            </div>
        </div>"""

    body = ""
    if expanded:
        segment_rows = "".join(render_segment(report, segment, tree_state) for segment in segments)
        body = f'<div class="segment-list">{segment_rows}</div>'

    return f'<div class="report-card">{header}{body}</div>'


def render_segment(report: Dict, segment: Dict, tree_state: TreeState) -> str:
    report_id = report.get("id")
    segment_id = segment.get("id")
    expanded = tree_state.is_segment_expanded(report_id, segment_id)

    header = f"""
        <div class="segment-header" {data_attrs(action="toggle_segment", report_id=report_id, segment_id=segment_id)}>
            <div class="segment-title">
                {_chevron(expanded)}
                <div>
                    <h3>{h(segment.get('name'))}</h3>
                    <p>{h(segment.get('objective'))}</p>
                </div>
            </div>
            <span class="segment-count">{segment_campaign_count(segment)} campaigns</span>
        </div>"""

    pipeline = render_stage_pipeline(report, segment) if expanded else ""
    return f'<div class="segment-card">{header}{pipeline}</div>'


def render_stage_pipeline(report: Dict, segment: Dict) -> str:
    """The six stage controls in fixed order with a connector between neighbours."""
    parts = []
    for idx, stage in enumerate(STAGES):
        parts.append(render_stage_button(report, segment, stage))
        if idx < len(STAGES) - 1:
            parts.append('<span class="stage-connector">→</span>')
    return f'<div class="pipeline">{"".join(parts)}</div>'


def render_stage_button(report: Dict, segment: Dict, stage: Dict) -> str:
    count = stage_count(segment, stage["id"])
    attrs = data_attrs(
        action="open_stage",
        report_id=report.get("id"),
        segment_id=segment.get("id"),
        stage_id=stage["id"],
    )
    if count == 0:
        return f"""
            <button class="stage-btn stage-empty" {attrs} disabled>
                <div class="stage-name" style="color: {DISABLED_STAGE_COLOR};">{h(stage['name'])}</div>
                <div class="stage-count">{count}</div>
            </button>"""

    color = stage["color"]
    return f"""
            <button class="stage-btn" {attrs} style="background-color: {color}15; border-color: {color};">
                <div class="stage-name" style="color: {color};">{h(stage['name'])}</div>
                <div class="stage-count" style="color: {color};">{count}</div>
            </button>"""
