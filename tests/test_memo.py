"""Tests for the compute-once cache cell."""

from asset_bundle.core import Memo


class TestMemo:
    """Test lazy value caching."""

    def test_not_attempted_initially(self) -> None:
        """Test that a new cell is unset and untouched."""
        cell: Memo[str] = Memo()

        assert not cell.is_set
        assert not cell.attempted
        assert cell.peek() is None

    def test_caches_first_value(self) -> None:
        """Test that a computed value is kept."""
        cell: Memo[str] = Memo()
        calls = []

        def compute() -> str:
            calls.append(1)
            return "value"

        assert cell.get(compute) == "value"
        assert cell.get(compute) == "value"
        assert len(calls) == 1
        assert cell.is_set

    def test_none_is_retried(self) -> None:
        """Test that a None result leaves the cell unset."""
        cell: Memo[str] = Memo()
        results = iter([None, None, "late"])

        assert cell.get(lambda: next(results)) is None
        assert cell.attempted
        assert not cell.is_set
        assert cell.get(lambda: next(results)) is None
        assert cell.get(lambda: next(results)) == "late"
        assert cell.attempts == 3
        assert cell.get(lambda: "ignored") == "late"
