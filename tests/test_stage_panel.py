from stage_panel import render_stage_panel


def _selected_stage(*campaigns):
    return {
        "report_id": "buyers",
        "segment_id": "first-time",
        "stage_id": "lead",
        "stage_name": "Lead",
        "campaigns": list(campaigns),
    }


def test_nothing_selected_renders_nothing() -> None:
    assert render_stage_panel(None) == ""


def test_panel_lists_every_campaign() -> None:
    markup = render_stage_panel(_selected_stage(
        {"name": "Welcome email", "channel": "email", "timing": "Day 0"},
        {"name": "Follow-up SMS", "channel": "sms", "timing": "Day 2"},
    ))

    assert "Lead Stage" in markup
    assert "2 campaigns in this stage" in markup
    assert 'data-campaign-index="0"' in markup
    assert 'data-campaign-index="1"' in markup
    assert "Follow-up SMS" in markup
    assert "📱" in markup
    assert 'data-action="dismiss_stage"' in markup


def test_unknown_channel_falls_back_to_email_style() -> None:
    markup = render_stage_panel(_selected_stage({"name": "Postcard", "channel": "post", "timing": "Week 1"}))

    assert "✉️" in markup
    assert "background-color: #2C537A;" in markup
    assert '<span class="campaign-channel">post</span>' in markup
