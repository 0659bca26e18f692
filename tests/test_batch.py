"""Unit tests for best-effort batch execution."""

from memegen_mcp.batch import BatchResult, run_batch
from memegen_mcp.errors import NotFoundError


def _worker(item):
    if item == "missing":
        raise NotFoundError(f"{item} not found")
    if item == "crash":
        raise RuntimeError("boom")
    return item.upper()


class TestRunBatch:

    def test_results_keep_input_order(self):
        batch = run_batch(["a", "b", "c", "d", "e"], _worker, max_workers=3)

        assert [result.value for result in batch.results] == ["A", "B", "C", "D", "E"]
        assert [result.index for result in batch.results] == [0, 1, 2, 3, 4]
        assert batch.succeeded == 5
        assert batch.failed == 0

    def test_failures_do_not_affect_siblings(self):
        batch = run_batch(["a", "missing", "crash", "b"], _worker)

        assert [result.success for result in batch.results] == [True, False, False, True]
        assert batch.results[1].error == {"kind": "not_found", "message": "missing not found"}
        assert batch.results[2].error == {"kind": "internal_error", "message": "boom"}

    def test_empty(self):
        batch = run_batch([], _worker)

        assert batch == BatchResult()
        assert batch.to_dict() == {"success": True, "succeeded": 0, "failed": 0, "results": []}

    def test_to_dict(self):
        data = run_batch(["a", "missing"], _worker).to_dict()

        assert data["success"] is False
        assert data["results"][0] == {"index": 0, "success": True, "result": "A"}
        assert data["results"][1]["error"]["kind"] == "not_found"
