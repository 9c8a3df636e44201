from typing import Dict, List, Optional, Tuple

from campaign_config import (
    ACCENT_COLOR,
    MUTED_COLOR,
    PERFORMANCE_FLOOR_COLOR,
    PERFORMANCE_TIERS,
    PRIMARY_COLOR,
    get_channel_style,
)
from markup import data_attrs, h

MONTHS = list(range(1, 13))


def channel_label(channel) -> str:
    if channel == "ma":
        return "Marketing Automation"
    text = "" if channel is None else str(channel)
    return text[:1].upper() + text[1:]


def score_color(score: float) -> str:
    for minimum, color in PERFORMANCE_TIERS:
        if score >= minimum:
            return color
    return PERFORMANCE_FLOOR_COLOR


def month_slots(active_months) -> List[Tuple[int, bool]]:
    """
    The twelve month slots paired with whether the campaign is active in that month.

    Membership is exact: the string "3" does not mark month 3.
    """
    active = list(active_months or [])
    return [(month, month in active) for month in MONTHS]


def _text(value) -> str:
    return f'<p class="section-text">{h(value)}</p>'


def _mono(value) -> str:
    return f'<p class="section-text mono">{h(value)}</p>'


def _quoted(value) -> str:
    return f'<p class="section-text italic">"{h(value)}"</p>'


def _highlight(value) -> str:
    return f'<p class="section-text highlight-copy">{h(value)}</p>'


def _note(value) -> str:
    return f'<p class="section-text italic highlight-note">{h(value)}</p>'


def _cta(value) -> str:
    return f'<div class="section-body"><span class="cta-badge" style="background-color: {PRIMARY_COLOR};">{h(value)}</span></div>'


def _tools(tools) -> str:
    pills = "".join(f'<span class="tool-pill">{h(tool)}</span>' for tool in tools)
    return f'<div class="section-body pills">{pills}</div>'


def _score(value) -> str:
    try:
        score = float(value)
    except (ValueError, TypeError):
        return _text(value)
    width = min(max(score, 0.0), 100.0)
    return f"""<div class="section-body score">
                <div class="score-track"><div class="score-fill" style="width: {width:g}%; background-color: {score_color(score)};"></div></div>
                <span class="score-value">{h(value)}</span>
            </div>"""


def _months(active_months) -> str:
    slots = []
    for month, active in month_slots(active_months):
        if active:
            slots.append(f'<div class="month-slot active" style="background-color: {PRIMARY_COLOR};">{month}</div>')
        else:
            slots.append(f'<div class="month-slot">{month}</div>')
    return f'<div class="section-body months">{"".join(slots)}</div>'


# (field, title, icon, icon color, body renderer) in display order
DETAIL_SECTIONS = [
    ("id", "Campaign ID", "📄", PRIMARY_COLOR, _mono),
    ("objective", "Objective", "🎯", PRIMARY_COLOR, _text),
    ("timing", "Timing", "🕒", PRIMARY_COLOR, _text),
    ("frequency", "Frequency", "📆", PRIMARY_COLOR, _text),
    ("triggerCondition", "Trigger Condition", "⚡", ACCENT_COLOR, _text),
    ("subjectLine", "Subject Line", "✉️", PRIMARY_COLOR, _quoted),
    ("content", "Content", "📄", PRIMARY_COLOR, _text),
    ("copy", "Copy", "📝", PRIMARY_COLOR, _highlight),
    ("cta", "Call to Action", "👆", ACCENT_COLOR, _cta),
    ("targetAudience", "Target Audience", "👥", PRIMARY_COLOR, _text),
    ("estimatedReach", "Estimated Reach", "📣", MUTED_COLOR, _text),
    ("cohort", "Cohort", "👥", MUTED_COLOR, _text),
    ("category", "Category", "🏷️", MUTED_COLOR, _text),
    ("tools", "Tools & Platforms", "🧰", MUTED_COLOR, _tools),
    ("owner", "Campaign Owner", "👤", PRIMARY_COLOR, _text),
    ("performanceScore", "Performance Score", "📈", PRIMARY_COLOR, _score),
    ("createdDate", "Created Date", "📅", MUTED_COLOR, _text),
    ("lastUpdated", "Last Updated", "📅", MUTED_COLOR, _text),
    ("activeMonths", "Active Months", "📅", PRIMARY_COLOR, _months),
    ("week", "Week", "📅", MUTED_COLOR, _text),
    ("notes", "Notes", "📝", ACCENT_COLOR, _note),
]


def render_sections(campaign: Dict) -> str:
    sections = []
    for field, title, icon, color, renderer in DETAIL_SECTIONS:
        value = campaign.get(field)
        if not value:
            continue
        sections.append(f"""
            <div class="detail-section" data-field="{field}">
                <div class="section-title"><span class="section-icon" style="color: {color};">{icon}</span><h3>{h(title)}</h3></div>
                {renderer(value)}
            </div>""")
    return "".join(sections)


def render_status_badge(status) -> str:
    if not status:
        return ""
    badge_class = "status-badge status-active" if status == "Active" else "status-badge"
    return f'<span class="{badge_class}">{h(status)}</span>'


def render_campaign_detail(campaign: Optional[Dict]) -> str:
    """
    Modal with every populated field of the selected campaign.

    Falsy fields (missing values, empty strings, empty lists, a zero score)
    are left out entirely. The footer actions carry no behaviour.
    """
    if campaign is None:
        return ""

    channel = campaign.get("channel")
    style = get_channel_style(channel)
    return f"""
    <div class="overlay detail-overlay">
        <div class="overlay-content detail-modal">
            <div class="detail-header">
                <div>
                    <h2>{h(campaign.get('name'))}</h2>
                    <div class="detail-channel">
                        <div class="channel-icon" style="background-color: {style['bg']};">{style['icon']}</div>
                        <span class="channel-label">{h(channel_label(channel))}</span>
                        {render_status_badge(campaign.get('status'))}
                    </div>
                </div>
                <button class="close-btn" {data_attrs(action="dismiss_campaign")}>✕</button>
            </div>
            <div class="detail-body">{render_sections(campaign)}</div>
            <div class="detail-footer">
                <button class="action-btn primary" style="background-color: {PRIMARY_COLOR};">Edit Campaign</button>
                <button class="action-btn secondary">View Analytics</button>
            </div>
        </div>
    </div>"""
