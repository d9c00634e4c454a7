"""Mock transport and log setup."""

import logging

import pytest

from formdesk.config import SUBMIT_DELAY_SECONDS
from formdesk.main import configure_logging
from formdesk.submission import DelayedSubmitter, SubmissionResult


class TestDelayedSubmitter:
    @pytest.mark.asyncio
    async def test_always_succeeds(self):
        result = await DelayedSubmitter(0).submit({"name": "Ana", "terms": True})
        assert result == SubmissionResult.success()
        assert result.error is None

    def test_default_delay_comes_from_config(self):
        assert DelayedSubmitter().delay_seconds == SUBMIT_DELAY_SECONDS


class TestConfigureLogging:
    def test_writes_formdesk_records_to_file(self, tmp_path):
        log_path = tmp_path / "logs" / "x.log"
        handler = configure_logging(log_path)
        try:
            logging.getLogger("formdesk.controller").debug("submit_start form=%s", "pizzaOrder")
            handler.flush()
        finally:
            logging.getLogger("formdesk").removeHandler(handler)
            handler.close()

        content = log_path.read_text(encoding="utf-8")
        assert "DEBUG formdesk.controller submit_start form=pizzaOrder" in content
