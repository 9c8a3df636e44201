import weakref
from typing import Dict, Optional

import requests

from campaign_config import POLL_INTERVAL_SECONDS, get_stage
from campaign_detail import render_campaign_detail
from data_client import CampaignDataClient, PollingTask
from stage_panel import render_stage_panel
from tree_state import TreeState
from tree_view import render_tree


def find_report(dataset: Optional[Dict], report_id) -> Optional[Dict]:
    for report in (dataset or {}).get("reports") or []:
        if report.get("id") == report_id:
            return report
    return None


def find_segment(report: Optional[Dict], segment_id) -> Optional[Dict]:
    if report is None:
        return None
    for segment in report.get("segments") or []:
        if segment.get("id") == segment_id:
            return segment
    return None


def apply_tree_event(tree_state: TreeState, dataset: Optional[Dict], event: Dict) -> bool:
    """
    Applies one click event from the tree component to ``tree_state``.

    Returns True when the state changed. Events naming reports, segments or
    stages that are not in the current dataset are ignored.
    """
    event_type = event.get("type")

    if event_type == "toggle_report":
        if find_report(dataset, event.get("report_id")) is None:
            return False
        tree_state.toggle_report(event["report_id"])
        return True

    if event_type == "toggle_segment":
        report = find_report(dataset, event.get("report_id"))
        if find_segment(report, event.get("segment_id")) is None:
            return False
        tree_state.toggle_segment(event["report_id"], event["segment_id"])
        return True

    if event_type == "open_stage":
        report = find_report(dataset, event.get("report_id"))
        segment = find_segment(report, event.get("segment_id"))
        stage = get_stage(event.get("stage_id"))
        if segment is None or stage is None:
            return False
        return tree_state.open_stage(report, segment, stage)

    if event_type == "select_campaign":
        try:
            index = int(event.get("campaign_index"))
        except (ValueError, TypeError):
            return False
        return tree_state.select_campaign(index)

    if event_type == "dismiss_stage":
        tree_state.dismiss_stage()
        return True

    if event_type == "dismiss_campaign":
        tree_state.dismiss_campaign()
        return True

    print(f"Warning: Ignoring unknown tree event type: {event_type}")
    return False


class DashboardSession:
    def __init__(self, api_url: str, http_session: Optional[requests.Session] = None,
                 poll_interval: float = POLL_INTERVAL_SECONDS):
        """
        Everything one open dashboard view owns: the data client, its polling
        task and the tree navigation state.

        The poller is cancelled by ``close()``, by ``reload()`` before it is
        replaced, and when the session object is garbage collected.
        """
        self.api_url = api_url
        self.http_session = http_session
        self.poll_interval = poll_interval
        self.last_event_id = None
        self._finalizer = None
        self._reset()

    def _reset(self):
        if self._finalizer is not None:
            self._finalizer()
        self.client = CampaignDataClient(self.api_url, session=self.http_session)
        self.tree_state = TreeState()
        self.poller = PollingTask(self.client.refresh, self.poll_interval)
        self._finalizer = weakref.finalize(self, self.poller.cancel)

    def open(self):
        """Issues the initial fetch and starts polling."""
        self.client.refresh()
        self.poller.start()

    def close(self):
        self._finalizer()

    def reload(self):
        """Drops all view state, fetches again and restarts polling."""
        self._reset()
        self.open()

    def handle_event(self, event) -> bool:
        """Applies a component event once. Returns True when a redraw is needed."""
        if not isinstance(event, dict):
            return False
        event_id = event.get("event_id")
        if event_id is None or event_id == self.last_event_id:
            return False
        self.last_event_id = event_id
        return apply_tree_event(self.tree_state, self.client.data, event)

    def build_component_payload(self) -> Dict:
        return {
            "tree_html": render_tree(self.client.data, self.tree_state),
            "stage_panel_html": render_stage_panel(self.tree_state.selected_stage),
            "campaign_detail_html": render_campaign_detail(self.tree_state.selected_campaign),
        }
