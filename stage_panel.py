from typing import Dict, Optional

from campaign_config import get_channel_style
from markup import data_attrs, h


def render_campaign_row(index: int, campaign: Dict) -> str:
    style = get_channel_style(campaign.get("channel"))
    return f"""
        <div class="campaign-row" {data_attrs(action="select_campaign", campaign_index=index)} style="background-color: {style['bg']}10; border-color: {style['border']};">
            <div class="channel-icon" style="background-color: {style['bg']};">{style['icon']}</div>
            <div class="campaign-row-body">
                <h3>{h(campaign.get('name'))}</h3>
                <div class="campaign-row-meta">
                    <span class="campaign-timing">🕒 {h(campaign.get('timing'))}</span>
                    <span class="campaign-channel">{h(campaign.get('channel'))}</span>
                </div>
            </div>
            <span class="chevron">▸</span>
        </div>"""


def render_stage_panel(selected_stage: Optional[Dict]) -> str:
    """Side panel listing the campaigns of the selected stage snapshot. Empty when nothing is selected."""
    if selected_stage is None:
        return ""

    campaigns = selected_stage.get("campaigns") or []
    rows = "".join(render_campaign_row(idx, campaign) for idx, campaign in enumerate(campaigns))
    return f"""
    <div class="overlay stage-overlay">
        <div class="overlay-content stage-panel">
            <div class="panel-header">
                <div>
                    <h2>{h(selected_stage.get('stage_name'))} Stage</h2>
                    <p>{len(campaigns)} campaigns in this stage</p>
                </div>
                <button class="close-btn" {data_attrs(action="dismiss_stage")}>✕</button>
            </div>
            <div class="campaign-list">{rows}</div>
        </div>
    </div>"""
