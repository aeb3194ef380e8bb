"""Tests for relaunch data models."""

from relaunch.models import ProcessRecord, ReapOutcome, ReapReport


def test_process_record_creation():
    """Test ProcessRecord dataclass creation."""
    record = ProcessRecord(pid=123, command_line="target/release/rust_test --env dev2")

    assert record.pid == 123
    assert record.command_line == "target/release/rust_test --env dev2"


def test_process_record_is_frozen():
    """Test that ProcessRecord is immutable (frozen)."""
    record = ProcessRecord(pid=1, command_line="/sbin/init")

    # Attempting to modify should raise an error
    try:
        record.pid = 999
        raise AssertionError("Should have raised FrozenInstanceError")
    except AttributeError:
        pass  # Expected behavior for frozen dataclass


def test_process_record_uses_slots():
    """Test that ProcessRecord uses __slots__."""
    record = ProcessRecord(pid=1, command_line="/sbin/init")

    assert not hasattr(record, "__dict__")


def test_process_records_compare_by_value():
    """Test two records for the same process are equal and hashable."""
    a = ProcessRecord(pid=42, command_line="dev2 worker")
    b = ProcessRecord(pid=42, command_line="dev2 worker")

    assert a == b
    assert len({a, b}) == 1


class TestReapReport:
    """Tests for ReapReport."""

    def test_ok_report(self):
        """Test an OK report exposes its PIDs."""
        report = ReapReport(ReapOutcome.OK, [100, 200])

        assert report.ok
        assert report.pids == [100, 200]

    def test_enumeration_failed_report(self):
        """Test a failed report is not ok and has no PIDs."""
        report = ReapReport(ReapOutcome.ENUMERATION_FAILED)

        assert not report.ok
        assert report.pids == []

    def test_outcome_values(self):
        """Test ReapOutcome enum values."""
        assert ReapOutcome.OK.value == "ok"
        assert ReapOutcome.ENUMERATION_FAILED.value == "enumeration_failed"
