"""Tests for discord_models.utils.pipeline_logger and the decode logger."""

from __future__ import annotations

from io import StringIO
from typing import Any
from unittest.mock import MagicMock

from rich.console import Console

from discord_models.core import MissingField, NestedDecodeFailure
from discord_models.ingest.logger import DecodeLogger
from discord_models.utils.pipeline_logger import BasePipelineLogger, StructuredBlock


class ConcreteLogger(BasePipelineLogger):
    """Concrete implementation for testing the abstract base class."""

    def __init__(self) -> None:
        super().__init__("test_logger")
        # Replace console with a string-capturing one for assertions
        self.console = Console(file=StringIO(), force_terminal=True, width=120)

    def summary(self, **kwargs: Any) -> None:
        self.print_summary("Test", elapsed=0.0, stats={})

    def get_output(self) -> str:
        self.console.file.seek(0)
        return self.console.file.read()


# ---------------------------------------------------------------------------
# TestStructuredBlock
# ---------------------------------------------------------------------------


class TestStructuredBlock:
    """Tests for StructuredBlock context manager."""

    def test_prints_title_on_enter(self) -> None:
        logger = ConcreteLogger()

        with logger.block("ready.json"):
            pass

        assert "ready.json" in logger.get_output()

    def test_field_prints_key_value(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.field("payloads", 12345)

        output = logger.get_output()
        assert "payloads:" in output
        assert "12345" in output

    def test_field_with_color(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.field("kind", "message", color="magenta")

        output = logger.get_output()
        assert "kind:" in output
        assert "message" in output

    def test_result_success(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.result("decoded 100 payloads")

        assert "decoded 100 payloads" in logger.get_output()

    def test_result_failure(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.result("failed", success=False)

        assert "failed" in logger.get_output()

    def test_skip(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.skip("file not found")

        assert "Skipped: file not found" in logger.get_output()

    def test_empty(self) -> None:
        logger = ConcreteLogger()

        with logger.block("Block") as b:
            b.empty()

        assert "Empty, skipping" in logger.get_output()


# ---------------------------------------------------------------------------
# TestBasePipelineLogger
# ---------------------------------------------------------------------------


class TestBasePipelineLogger:
    """Tests for BasePipelineLogger base class."""

    def test_info_delegates_to_python_logger(self) -> None:
        logger = ConcreteLogger()
        logger._logger = MagicMock()

        logger.info("test message")

        logger._logger.info.assert_called_once_with("test message")

    def test_warning_delegates_to_python_logger(self) -> None:
        logger = ConcreteLogger()
        logger._logger = MagicMock()

        logger.warning("warn message")

        logger._logger.warning.assert_called_once_with("warn message")

    def test_error_delegates_to_python_logger(self) -> None:
        logger = ConcreteLogger()
        logger._logger = MagicMock()

        logger.error("error message")

        logger._logger.error.assert_called_once_with("error message")

    def test_success_prints_checkmark(self) -> None:
        logger = ConcreteLogger()

        logger.success("done")

        assert "done" in logger.get_output()

    def test_block_yields_structured_block(self) -> None:
        logger = ConcreteLogger()

        with logger.block("test") as b:
            assert isinstance(b, StructuredBlock)

    def test_print_summary_outputs_panel(self) -> None:
        logger = ConcreteLogger()

        logger.print_summary(
            "Test Pipeline",
            elapsed=12.3,
            stats={"Payloads": 100, "Files": 5},
        )

        output = logger.get_output()
        assert "Test Pipeline Complete" in output
        assert "12.3s" in output

    def test_print_summary_with_extra_sections(self) -> None:
        logger = ConcreteLogger()

        logger.print_summary(
            "Test",
            elapsed=1.0,
            stats={"Total": 10},
            extra_sections={"Details": {"Sub-item": 5}},
        )

        assert "Test Complete" in logger.get_output()


# ---------------------------------------------------------------------------
# TestDecodeLogger
# ---------------------------------------------------------------------------


class TestDecodeLogger:
    """Tests for DecodeLogger (the concrete subclass in ingest/logger.py)."""

    def test_decode_failure_includes_path(self) -> None:
        logger = DecodeLogger()
        logger._logger = MagicMock()
        error = NestedDecodeFailure("author", MissingField("id"))

        logger.decode_failure("message", error, "messages.json[3]")

        msg = logger._logger.warning.call_args[0][0]
        assert "message" in msg
        assert "messages.json[3]" in msg
        assert "author.id" in msg

    def test_unreadable_logs_error(self) -> None:
        logger = DecodeLogger()
        logger._logger = MagicMock()

        logger.unreadable("x.json", "No such file")

        assert "x.json" in logger._logger.error.call_args[0][0]

    def test_summary_calls_print_summary(self) -> None:
        logger = DecodeLogger()
        logger.console = Console(file=StringIO(), force_terminal=True, width=120)

        logger.summary(files=2, decoded=10, failed=1, elapsed=5.5)

        logger.console.file.seek(0)
        output = logger.console.file.read()
        assert "Decode Complete" in output
        assert "Payloads failed" in output
