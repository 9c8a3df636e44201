import copy
from typing import Dict, Optional, Tuple


class TreeState:
    def __init__(self):
        """
        View-local navigation state of the campaign tree.

        ``expanded_reports`` holds report ids, ``expanded_segments`` holds
        ``(report_id, segment_id)`` pairs so equal segment ids under different
        reports stay independent. ``selected_stage`` and ``selected_campaign``
        are snapshots taken at selection time; replacing the dataset does not
        touch them.
        """
        self.expanded_reports = set()
        self.expanded_segments = set()
        self.selected_stage: Optional[Dict] = None
        self.selected_campaign: Optional[Dict] = None

    @staticmethod
    def segment_key(report_id, segment_id) -> Tuple:
        return (report_id, segment_id)

    def toggle_report(self, report_id):
        self.expanded_reports ^= {report_id}

    def is_report_expanded(self, report_id) -> bool:
        return report_id in self.expanded_reports

    def toggle_segment(self, report_id, segment_id):
        self.expanded_segments ^= {self.segment_key(report_id, segment_id)}

    def is_segment_expanded(self, report_id, segment_id) -> bool:
        return self.segment_key(report_id, segment_id) in self.expanded_segments

    def open_stage(self, report: Dict, segment: Dict, stage: Dict) -> bool:
        """Selects a stage for the side panel. Stages without campaigns are rejected."""
        bucket = (segment.get("stages") or {}).get(stage["id"]) or {}
        campaigns = bucket.get("campaigns") or []
        if not campaigns:
            return False

        self.selected_stage = {
            "report_id": report.get("id"),
            "segment_id": segment.get("id"),
            "stage_id": stage["id"],
            "stage_name": stage["name"],
            "campaigns": copy.deepcopy(list(campaigns)),
        }
        return True

    def select_campaign(self, index: int) -> bool:
        if self.selected_stage is None:
            return False
        campaigns = self.selected_stage["campaigns"]
        if not 0 <= index < len(campaigns):
            return False
        self.selected_campaign = copy.deepcopy(campaigns[index])
        return True

    def dismiss_stage(self):
        self.selected_stage = None

    def dismiss_campaign(self):
        self.selected_campaign = None
