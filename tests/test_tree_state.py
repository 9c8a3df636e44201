from campaign_config import get_stage
from tree_state import TreeState


def test_toggle_report_twice_restores_membership() -> None:
    state = TreeState()
    state.expanded_reports = {"tenants"}

    state.toggle_report("buyers")
    assert state.expanded_reports == {"tenants", "buyers"}
    state.toggle_report("buyers")
    assert state.expanded_reports == {"tenants"}


def test_segment_keys_are_scoped_by_report() -> None:
    state = TreeState()
    state.toggle_segment("buyers", "vip")

    assert state.is_segment_expanded("buyers", "vip")
    assert not state.is_segment_expanded("tenants", "vip")

    state.toggle_segment("buyers", "vip")
    assert state.expanded_segments == set()


def test_open_stage_snapshots_campaigns(buyers_dataset) -> None:
    report = buyers_dataset["reports"][0]
    segment = report["segments"][0]
    state = TreeState()

    assert state.open_stage(report, segment, get_stage("lead"))
    assert state.selected_stage["report_id"] == "buyers"
    assert state.selected_stage["segment_id"] == "first-time"
    assert state.selected_stage["stage_id"] == "lead"
    assert state.selected_stage["stage_name"] == "Lead"
    assert len(state.selected_stage["campaigns"]) == 3

    segment["stages"]["lead"]["campaigns"].clear()
    assert len(state.selected_stage["campaigns"]) == 3


def test_open_stage_rejects_empty_stage(buyers_dataset) -> None:
    report = buyers_dataset["reports"][0]
    state = TreeState()

    assert not state.open_stage(report, report["segments"][0], get_stage("deal"))
    assert not state.open_stage(report, report["segments"][1], get_stage("lead"))
    assert state.selected_stage is None


def test_select_campaign_requires_valid_index(buyers_dataset) -> None:
    report = buyers_dataset["reports"][0]
    state = TreeState()
    assert not state.select_campaign(0)

    state.open_stage(report, report["segments"][0], get_stage("lead"))
    assert state.select_campaign(1)
    assert state.selected_campaign["name"] == "Follow-up SMS"
    assert not state.select_campaign(7)
    assert state.selected_campaign["name"] == "Follow-up SMS"


def test_dismissals_are_independent(buyers_dataset) -> None:
    report = buyers_dataset["reports"][0]
    state = TreeState()
    state.open_stage(report, report["segments"][0], get_stage("lead"))
    state.select_campaign(0)

    state.dismiss_stage()
    assert state.selected_stage is None
    assert state.selected_campaign["name"] == "Welcome email"

    state.open_stage(report, report["segments"][0], get_stage("lead"))
    state.dismiss_campaign()
    assert state.selected_campaign is None
    assert state.selected_stage["stage_id"] == "lead"
