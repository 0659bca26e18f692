"""
Best-effort batch execution.

Each unit runs on a shared-nothing worker thread. A unit's failure is captured
in its own result record and never cancels or hides its siblings; the caller
gets every result back in input order together with a success/failure tally.
"""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .config import BATCH_MAX_WORKERS
from .errors import MemeToolError

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
ValueT = TypeVar("ValueT")


@dataclass
class BatchItemResult(Generic[ValueT]):
    index: int
    success: bool
    value: ValueT | None = None
    error: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"index": self.index, "success": self.success}
        if self.success:
            data["result"] = self.value.to_dict() if hasattr(self.value, "to_dict") else self.value
        else:
            data["error"] = self.error
        return data


@dataclass
class BatchResult(Generic[ValueT]):
    results: list[BatchItemResult[ValueT]] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return len(self.results) - self.succeeded

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.failed == 0,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "results": [result.to_dict() for result in self.results],
        }


def _run_one(index: int, item, worker) -> BatchItemResult:
    try:
        return BatchItemResult(index=index, success=True, value=worker(item))
    except MemeToolError as e:
        logger.warning(f"Batch item {index} failed: {e}")
        return BatchItemResult(index=index, success=False, error=e.to_dict())
    except Exception as e:
        logger.exception(f"Batch item {index} crashed")
        return BatchItemResult(index=index, success=False, error={"kind": "internal_error", "message": str(e)})


def run_batch(
    items: Sequence[ItemT],
    worker: Callable[[ItemT], ValueT],
    max_workers: int = BATCH_MAX_WORKERS,
) -> BatchResult[ValueT]:
    if not items:
        return BatchResult()

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(items))), thread_name_prefix="meme_batch") as pool:
        futures = [pool.submit(_run_one, index, item, worker) for index, item in enumerate(items)]
        results = [future.result() for future in futures]

    batch = BatchResult(results=results)
    logger.info(f"Batch finished: {batch.succeeded} succeeded, {batch.failed} failed")
    return batch
