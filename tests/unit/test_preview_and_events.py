"""Unit tests for the markdown preview and the export event log."""

import pytest

from resumekit.contexts.planning import render_markdown
from resumekit.utils.event_logging import get_recent_events, log_export_event


@pytest.mark.unit
def test_preview_placeholders_for_empty_record(empty_record):
    markdown = render_markdown(empty_record)

    assert "**Name:** Your Name" in markdown
    assert "**Email:** your.email@example.com" in markdown
    assert "**Mobile:** Your Phone" in markdown
    assert "Location" not in markdown
    assert "##" not in markdown


@pytest.mark.unit
def test_preview_sections(full_record):
    markdown = render_markdown(full_record)

    assert markdown.count("## TECHNICAL SKILLS") == 1
    assert "**Cloud Platform:** AWS, Azure" in markdown
    assert "### Project: Cloud Migration" in markdown
    # Unnamed projects are not previewed
    assert "Internal Tools Group" not in markdown
    assert "Working as Senior DevOps Engineer in Nimbus Systems, Pune from Jan 2021 - Present." in markdown


@pytest.mark.unit
def test_preview_section_order(full_record):
    markdown = render_markdown(full_record)

    assert markdown.index("## OBJECTIVE") < markdown.index("## CERTIFICATIONS") < markdown.index("## DECLARATION")


@pytest.mark.unit
def test_event_log_appends_and_filters(tmp_path):
    events_file = tmp_path / "events.log"

    log_export_event("export_started", "Asha Verma", source="exporting", events_file=events_file, fmt="pdf")
    log_export_event("export_completed", "Asha Verma", source="exporting", events_file=events_file, fmt="pdf")
    log_export_event("export_started", "Ravi Verma", source="exporting", events_file=events_file, fmt="docx")

    assert len(get_recent_events(events_file=events_file)) == 3
    asha = get_recent_events(resume_name="Asha Verma", events_file=events_file)
    assert [e["event_type"] for e in asha] == ["export_started", "export_completed"]
    started = get_recent_events(event_type="export_started", events_file=events_file)
    assert [e["resume_name"] for e in started] == ["Asha Verma", "Ravi Verma"]
    assert get_recent_events(n=1, events_file=events_file)[0]["fmt"] == "docx"


@pytest.mark.unit
def test_event_log_skips_malformed_lines(tmp_path):
    events_file = tmp_path / "events.log"
    events_file.write_text("not json\n", encoding="utf-8")
    log_export_event("export_failed", "Asha Verma", source="exporting", events_file=events_file)

    events = get_recent_events(events_file=events_file)

    assert len(events) == 1
    assert events[0]["event_type"] == "export_failed"
    assert "timestamp" in events[0]


@pytest.mark.unit
def test_event_log_missing_file(tmp_path):
    assert get_recent_events(events_file=tmp_path / "none.log") == []
