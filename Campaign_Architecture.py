import streamlit as st

from campaign_config import REDRAW_INTERVAL_SECONDS, load_api_url
from component_generation import generate_component
from dashboard import DashboardSession
from data_client import STATUS_ERROR, STATUS_LOADING
from markup import h

st.set_page_config(
    layout="wide",
    page_icon="📣",
    page_title="Campaign Architecture",
    initial_sidebar_state="collapsed"
)

st.markdown(
    """
    <style>
        [data-testid="stAppViewContainer"] {
            background: linear-gradient(135deg, #f8fafc 0%, #f1f5f9 100%);
        }
        [data-testid="stHeader"] {
            background: transparent;
        }
        .page-title {
            font-family: 'Inter', sans-serif;
            font-size: 36px;
            font-weight: 700;
            color: #111827;
            margin-bottom: 4px;
        }
        .page-subtitle {
            color: #4b5563;
            margin-bottom: 24px;
        }
        .status-box {
            max-width: 460px;
            margin: 60px auto 16px auto;
            text-align: center;
            border-radius: 10px;
            padding: 24px;
        }
        .status-box.error {
            background: #fef2f2;
            border: 1px solid #fecaca;
        }
        .status-box .error-title { color: #dc2626; font-weight: 600; margin-bottom: 8px; }
        .status-box .error-message { color: #ef4444; font-size: 14px; }
        .status-box .error-backend { color: #4b5563; font-size: 14px; margin-top: 16px; }
        .st-key-retry_fetch {
            display: flex;
            justify-content: center;
        }
    </style>
    """,
    unsafe_allow_html=True
)

css = """
<style>
    body {
        font-family: 'Inter', sans-serif;
        margin: 0;
        padding: 4px;
        box-sizing: border-box;
        background-color: transparent;
        color: #111827;
    }
    #component-root {
        width: 100%;
        position: relative;
    }
    h2, h3, p { margin: 0; }

    .tree { display: flex; flex-direction: column; gap: 16px; }

    .report-card {
        background: #fff;
        border: 2px solid #e5e7eb;
        border-radius: 12px;
        overflow: hidden;
        box-shadow: 0 6px 16px rgba(0, 0, 0, 0.08);
    }
    .report-header {
        color: #fff;
        padding: 24px;
        cursor: pointer;
        display: flex;
        align-items: center;
        justify-content: space-between;
        transition: opacity 0.2s ease;
    }
    .report-header:hover { opacity: 0.9; }
    .report-title { display: flex; align-items: center; gap: 16px; }
    .report-title h2 { font-size: 24px; font-weight: 700; }
    .report-title p { font-size: 14px; opacity: 0.9; }
    .report-icon {
        background: rgba(255, 255, 255, 0.2);
        border-radius: 8px;
        padding: 10px 12px;
        font-size: 22px;
    }
    .report-total { text-align: right; }
    .report-total-value { font-size: 30px; font-weight: 700; }
    .report-total-label { font-size: 14px; opacity: 0.9; }
    .chevron { font-size: 20px; width: 20px; display: inline-block; }

    .segment-list { padding: 24px; display: flex; flex-direction: column; gap: 12px; }
    .segment-card { border: 2px solid #e5e7eb; border-radius: 8px; overflow: hidden; }
    .segment-header {
        background: #f9fafb;
        padding: 16px;
        cursor: pointer;
        display: flex;
        align-items: center;
        justify-content: space-between;
    }
    .segment-header:hover { background: #f3f4f6; }
    .segment-title { display: flex; align-items: center; gap: 12px; }
    .segment-title h3 { font-size: 18px; font-weight: 600; }
    .segment-title p { font-size: 12px; color: #6b7280; }
    .segment-count { font-size: 14px; color: #4b5563; }

    .pipeline {
        display: flex;
        align-items: center;
        gap: 8px;
        overflow-x: auto;
        padding: 16px;
        background: #fff;
    }
    .stage-btn {
        flex-shrink: 0;
        min-width: 140px;
        padding: 12px 16px;
        border-radius: 8px;
        border: 2px solid;
        cursor: pointer;
        font-family: inherit;
        text-align: center;
    }
    .stage-btn:hover { box-shadow: 0 4px 10px rgba(0, 0, 0, 0.12); }
    .stage-btn.stage-empty {
        background: #f9fafb;
        border-color: #e5e7eb;
        opacity: 0.5;
        cursor: not-allowed;
        box-shadow: none;
    }
    .stage-name { font-weight: 600; font-size: 14px; margin-bottom: 4px; }
    .stage-count { font-size: 18px; font-weight: 700; }
    .stage-empty .stage-count { color: #9ca3af; }
    .stage-connector { color: #d1d5db; font-size: 20px; flex-shrink: 0; }

    .overlay {
        position: absolute;
        inset: 0;
        min-height: 100%;
        background: rgba(0, 0, 0, 0.5);
        display: flex;
    }
    .stage-overlay { z-index: 50; justify-content: flex-end; }
    .detail-overlay { z-index: 60; justify-content: center; align-items: flex-start; padding: 16px; }
    .stage-panel { background: #fff; width: 100%; max-width: 672px; min-height: 100%; }
    .detail-modal { background: #fff; width: 100%; max-width: 672px; border-radius: 16px; overflow: hidden; }

    .panel-header, .detail-header {
        display: flex;
        justify-content: space-between;
        align-items: flex-start;
        padding: 24px;
        border-bottom: 1px solid #e5e7eb;
    }
    .panel-header h2, .detail-header h2 { font-size: 24px; font-weight: 700; margin-bottom: 6px; }
    .panel-header p { color: #4b5563; }
    .close-btn {
        border: none;
        background: none;
        color: #9ca3af;
        font-size: 22px;
        cursor: pointer;
    }
    .close-btn:hover { color: #4b5563; }

    .campaign-list { padding: 24px; display: flex; flex-direction: column; gap: 12px; }
    .campaign-row {
        display: flex;
        align-items: flex-start;
        gap: 16px;
        border: 2px solid;
        border-radius: 8px;
        padding: 16px;
        cursor: pointer;
    }
    .campaign-row:hover { box-shadow: 0 6px 14px rgba(0, 0, 0, 0.12); }
    .campaign-row-body { flex: 1; }
    .campaign-row-body h3 { font-size: 16px; font-weight: 600; margin-bottom: 8px; }
    .campaign-row-meta { display: flex; gap: 16px; font-size: 14px; color: #4b5563; }
    .campaign-channel { text-transform: capitalize; }
    .channel-icon { border-radius: 8px; padding: 8px 10px; color: #fff; }

    .detail-channel { display: flex; align-items: center; gap: 8px; }
    .channel-label { font-size: 14px; font-weight: 500; color: #4b5563; }
    .status-badge {
        margin-left: 8px;
        padding: 4px 8px;
        border-radius: 9999px;
        font-size: 12px;
        font-weight: 500;
        background: #f3f4f6;
        color: #1f2937;
    }
    .status-badge.status-active { background: #dcfce7; color: #166534; }

    .detail-body { padding: 24px; display: flex; flex-direction: column; gap: 24px; }
    .section-title { display: flex; align-items: center; gap: 8px; margin-bottom: 8px; }
    .section-title h3 { font-size: 16px; font-weight: 600; }
    .section-text, .section-body { margin-left: 28px; color: #374151; }
    .mono { font-family: monospace; font-size: 14px; }
    .italic { font-style: italic; }
    .highlight-copy { background: #eff6ff; border: 1px solid #bfdbfe; border-radius: 8px; padding: 12px; }
    .highlight-note { background: #fefce8; border: 1px solid #fef08a; border-radius: 8px; padding: 12px; }
    .cta-badge { display: inline-block; padding: 8px 16px; border-radius: 8px; color: #fff; font-weight: 500; }
    .pills { display: flex; flex-wrap: wrap; gap: 8px; }
    .tool-pill {
        padding: 4px 12px;
        border-radius: 9999px;
        font-size: 14px;
        border: 1px solid #7BA0B2;
        background: #7BA0B215;
        color: #1F343F;
    }
    .score { display: flex; align-items: center; gap: 12px; }
    .score-track { flex: 1; background: #e5e7eb; border-radius: 9999px; height: 12px; }
    .score-fill { height: 12px; border-radius: 9999px; }
    .score-value { font-size: 18px; font-weight: 700; }
    .months { display: flex; gap: 4px; }
    .month-slot {
        flex: 1;
        text-align: center;
        padding: 8px 0;
        border-radius: 4px;
        font-size: 12px;
        font-weight: 500;
        background: #f3f4f6;
        color: #9ca3af;
    }
    .month-slot.active { color: #fff; }

    .detail-footer { display: flex; gap: 12px; padding: 24px; border-top: 1px solid #e5e7eb; background: #f9fafb; }
    .action-btn {
        flex: 1;
        padding: 12px;
        border: none;
        border-radius: 8px;
        font-family: inherit;
        font-weight: 500;
        cursor: pointer;
    }
    .action-btn.primary { color: #fff; }
    .action-btn.secondary { background: #e5e7eb; color: #374151; }
</style>
"""

script = """
let lastHeight = 0;

function adjustHeight() {
    const root = document.getElementById('component-root');
    if (!root) return;
    let requiredHeight = root.scrollHeight;
    root.querySelectorAll('.overlay-content').forEach((panel) => {
        requiredHeight = Math.max(requiredHeight, panel.scrollHeight + 40);
    });
    if (requiredHeight !== lastHeight) {
        lastHeight = requiredHeight;
        Streamlit.setFrameHeight(requiredHeight + 10);
    }
}

function onClick(event) {
    const target = event.target.closest('[data-action]');
    if (!target || target.disabled) return;
    const payload = { type: target.dataset.action };
    if (target.dataset.reportId !== undefined) payload.report_id = target.dataset.reportId;
    if (target.dataset.segmentId !== undefined) payload.segment_id = target.dataset.segmentId;
    if (target.dataset.stageId !== undefined) payload.stage_id = target.dataset.stageId;
    if (target.dataset.campaignIndex !== undefined) payload.campaign_index = parseInt(target.dataset.campaignIndex, 10);
    emitEvent(payload);
}

function onRender(event) {
    const root = document.getElementById('component-root');
    try {
        const data = event.detail.args.component_data;
        if (!data || !root) { return; }
        root.innerHTML = (data.tree_html || '') + (data.stage_panel_html || '') + (data.campaign_detail_html || '');
        adjustHeight();
    } catch (error) {
        if (root) root.innerHTML = `<p style="color: red; padding: 20px;">Error rendering component: ${error.message}. Check console.</p>`;
        Streamlit.setFrameHeight(100);
    }
}

document.addEventListener('click', onClick);
window.addEventListener('resize', adjustHeight);
Streamlit.events.addEventListener(Streamlit.RENDER_EVENT, onRender);
Streamlit.setComponentReady();
"""

campaign_tree_component = generate_component(
    "campaign_architecture_tree",
    template=css,
    script=script
)

if 'dashboard_session' not in st.session_state:
    session = DashboardSession(load_api_url())
    with st.spinner("Loading campaign data..."):
        session.open()
    st.session_state.dashboard_session = session

st.markdown(
    """
    <div class="page-title">Campaign Architecture</div>
    <div class="page-subtitle">Unified interactive report across all client types</div>
    """,
    unsafe_allow_html=True
)


@st.fragment(run_every=REDRAW_INTERVAL_SECONDS)
def render_dashboard():
    session = st.session_state.dashboard_session
    status, _, error = session.client.snapshot()

    if status == STATUS_LOADING:
        st.markdown('<div class="status-box"><p>Loading campaign data...</p></div>', unsafe_allow_html=True)
        return

    if status == STATUS_ERROR:
        st.markdown(
            f"""
            <div class="status-box error">
                <p class="error-title">Error loading data</p>
                <p class="error-message">{h(error)}</p>
                <p class="error-backend">Backend API: {h(session.api_url)}</p>
            </div>
            """,
            unsafe_allow_html=True
        )
        if st.button("Retry", key="retry_fetch", type="primary"):
            with st.spinner("Loading campaign data..."):
                session.reload()
            st.rerun()
        return

    component_return_value = campaign_tree_component(
        component_data=session.build_component_payload(),
        key="campaign_tree_state",
        default=None
    )

    if session.handle_event(component_return_value):
        st.rerun(scope="fragment")


render_dashboard()
