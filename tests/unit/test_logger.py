"""Unit tests for export session logging."""

import pytest

from resumekit import __version__
from resumekit.contexts.exporting.logger import CONTEXT_PREFIX, _log_debug, _log_info, setup_export_logger
from resumekit.utils.logger import close_logger


@pytest.mark.unit
def test_export_session_log_has_provenance_and_prefixed_messages(tmp_path):
    log_file = setup_export_logger(tmp_path / "session", badge_location="https://example.com/b.png")
    try:
        _log_info("Starting PDF export: Asha Verma")
        _log_debug("  Output directory: outs/exports")
    finally:
        close_logger()

    content = log_file.read_text(encoding="utf-8")

    assert log_file == tmp_path / "session" / "export.log"
    assert f"resumekit: {__version__}" in content
    assert "Badge location: https://example.com/b.png" in content
    assert f"{CONTEXT_PREFIX} Starting PDF export: Asha Verma" in content
    # The file sink keeps DEBUG even when the console shows INFO only
    assert "Output directory: outs/exports" in content
