"""Tests for BatchFlow fan-out and aggregation.

This module tests:
- Concurrent execution of parameterized traversals
- Result ordering
- Failure propagation
- Per-traversal shared state
- Nesting a batch inside a flow
"""

import time
import pytest
from typing import Any, Dict, List, Optional, Sequence

from actiongraph import BatchFlow, Flow, DEFAULT_ACTION, ExecutionError
from tests.core.graph.math_nodes import (
    AddNode,
    DelayNode,
    FailingNode,
    MultiplyNode,
    ParamsRecorderNode,
    chain,
)


class DelayBatchFlow(BatchFlow):
    """Batch whose parameter sets come from ``shared["delays"]``."""

    async def prepare(self, shared: Dict[str, Any]) -> Sequence[Any]:
        return [{"delay": delay} for delay in shared["delays"]]


class RecordingBatchFlow(DelayBatchFlow):
    """Batch that stores its aggregated results in shared state."""

    async def finalize(self, prep_result: Any, exec_result: Any, shared: Dict[str, Any]) -> Optional[str]:
        shared["batch_results"] = exec_result
        shared["batch_params"] = prep_result
        return "batched"


class PartitionedBatchFlow(BatchFlow):
    """Batch that gives each traversal its own shared-state dict."""

    async def prepare(self, shared: Dict[str, Any]) -> Sequence[Any]:
        shared["items"] = [{"value": start} for start in shared["starts"]]
        return [{"index": i} for i in range(len(shared["starts"]))]

    def partition_shared(self, shared: Dict[str, Any], index: int, params: Any) -> Any:
        return shared["items"][index]


class FailOnParamNode(DelayNode):
    """Delay node that fails for one designated delay."""

    async def execute(self, prep_result: Any) -> Any:
        delay = await super().execute(prep_result)
        if self.params.get("fail"):
            raise ExecutionError(f"failed at {delay}")
        return delay


class TestBatchExecution:
    """Test suite for batch execution."""

    @pytest.mark.asyncio
    async def test_runs_concurrently(self):
        """Test that total time tracks the longest delay, not the sum."""
        delays = [0.2, 0.4, 0.3, 0.5, 0.1] * 4
        flow = DelayBatchFlow(DelayNode())

        started = time.perf_counter()
        results = await flow.run({"delays": delays})
        elapsed = time.perf_counter() - started

        assert len(results) == len(delays)
        assert elapsed < 1.5
        assert elapsed < sum(delays) / 2

    @pytest.mark.asyncio
    async def test_results_keep_input_order(self):
        """Test ordering when later inputs finish first."""
        delays = [0.15, 0.1, 0.05, 0.0]
        flow = DelayBatchFlow(DelayNode())

        results = await flow.run({"delays": delays})

        assert results == [f"slept {delay}" for delay in delays]

    @pytest.mark.asyncio
    async def test_empty_batch(self):
        """Test that no parameter sets yields no results."""
        assert await DelayBatchFlow(DelayNode()).run({"delays": []}) == []

    @pytest.mark.asyncio
    async def test_base_prepare_is_empty(self):
        """Test the default parameter sequence."""
        assert await BatchFlow(DelayNode()).run({}) == []

    @pytest.mark.asyncio
    async def test_each_traversal_gets_its_params(self):
        """Test that every node in a traversal sees that traversal's params."""
        class ParamsBatch(BatchFlow):
            async def prepare(self, shared):
                return [{"n": 1}, {"n": 2}, {"n": 3}]

        shared: Dict[str, List[Any]] = {}
        flow = ParamsBatch(chain(ParamsRecorderNode(), ParamsRecorderNode()))

        results = await flow.run(shared)

        assert results == [DEFAULT_ACTION] * 3
        assert sorted(p["n"] for p in shared["params"]) == [1, 1, 2, 2, 3, 3]

    @pytest.mark.asyncio
    async def test_none_param_set_is_passed_through(self):
        """Test that a None parameter set is not replaced by the flow's params."""
        class NoneParamsBatch(BatchFlow):
            async def prepare(self, shared):
                return [None, {"x": 1}]

        shared: Dict[str, List[Any]] = {}
        flow = NoneParamsBatch(ParamsRecorderNode(), params={"own": 1})

        await flow.run(shared)

        assert sorted(shared["params"], key=repr) == sorted([None, {"x": 1}], key=repr)
        assert {"own": 1} not in shared["params"]

    @pytest.mark.asyncio
    async def test_finalize_receives_results(self):
        """Test that finalize runs after all traversals with ordered results."""
        shared = {"delays": [0.02, 0.01]}
        flow = RecordingBatchFlow(DelayNode())

        results = await flow.run(shared)

        assert shared["batch_results"] == results == ["slept 0.02", "slept 0.01"]
        assert shared["batch_params"] == [{"delay": 0.02}, {"delay": 0.01}]


class TestBatchFailures:
    """Test suite for failures inside a batch."""

    @pytest.mark.asyncio
    async def test_single_failure_fails_batch(self):
        """Test that one failing traversal fails the whole batch."""
        class FailingBatch(BatchFlow):
            async def prepare(self, shared):
                return [{"delay": 0.01}, {"delay": 0.02, "fail": True}, {"delay": 0.01}]

        with pytest.raises(ExecutionError, match="failed at 0.02"):
            await FailingBatch(FailOnParamNode()).run({})

    @pytest.mark.asyncio
    async def test_finalize_skipped_on_failure(self):
        """Test that no partial results are committed."""
        shared = {"delays": [0.01]}
        with pytest.raises(ExecutionError):
            await RecordingBatchFlow(FailingNode()).run(shared)
        assert "batch_results" not in shared


class TestBatchSharedState:
    """Test suite for shared-state partitioning."""

    @pytest.mark.asyncio
    async def test_partitioned_shared_state(self):
        """Test that each traversal mutates only its own partition."""
        shared = {"starts": [1, 2, 3]}
        flow = PartitionedBatchFlow(chain(AddNode(addend=1), MultiplyNode(factor=10)))

        await flow.run(shared)

        assert [item["value"] for item in shared["items"]] == [20, 30, 40]
        assert "value" not in shared


class TestNestedBatch:
    """Test suite for batches used as flow steps."""

    @pytest.mark.asyncio
    async def test_batch_as_flow_step(self):
        """Test that a nested batch yields its finalize action to the outer flow."""
        batch = RecordingBatchFlow(DelayNode())
        batch.add_successor(AddNode(addend=1), "batched")
        shared = {"delays": [0.01, 0.02], "value": 0}

        action = await Flow(batch).run(shared)

        assert action == DEFAULT_ACTION
        assert shared["batch_results"] == ["slept 0.01", "slept 0.02"]
        assert shared["value"] == 1
