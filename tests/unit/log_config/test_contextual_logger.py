"""Tests for the contextual logger wrapper."""

import logging

from domwait.log_config.logger import ContextualLogger, get_logger


class TestContextualLogger:
    def test_prefixes_context(self, caplog):
        log = ContextualLogger(get_logger("domwait.test"), wait="abc123", kind="removal")
        with caplog.at_level(logging.DEBUG, logger="domwait.test"):
            log.debug("Observing %d root(s)", 2)
        assert "[wait=abc123] [kind=removal] Observing 2 root(s)" in caplog.text

    def test_no_context_leaves_message_alone(self, caplog):
        log = ContextualLogger(get_logger("domwait.test"))
        with caplog.at_level(logging.INFO, logger="domwait.test"):
            log.info("plain")
        assert caplog.records[-1].getMessage() == "plain"

    def test_context_is_attached_to_the_record(self, caplog):
        log = ContextualLogger(get_logger("domwait.test"), wait="w1", kind="wait_for")
        with caplog.at_level(logging.WARNING, logger="domwait.test"):
            log.warning("slow")
        record = caplog.records[-1]
        assert record.wait == "w1"
        assert record.kind == "wait_for"
