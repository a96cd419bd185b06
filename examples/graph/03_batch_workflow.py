"""
Parameterized Batch Workflow Example

This example demonstrates:
1. A BatchFlow whose ``prepare`` returns one param set per traversal
2. Concurrent traversals of the same graph
3. A retrying node inside each traversal

Forty simulated jobs of up to 2.5s each finish in roughly the time of the
slowest one.
"""

import asyncio
import random
import time
from typing import Any, Dict, List, Optional, Sequence

from actiongraph import BatchFlow, RetryNode, ExecutionError
from actiongraph.core.logging import configure_logging, LogComponent, get_logger

logger = get_logger(LogComponent.WORKFLOW)

DELAYS_MS = [1000, 2000, 1500, 2500, 800] * 8

###################################################################
# Nodes
###################################################################

class SimulatedJobNode(RetryNode):
    """Sleeps for ``params["delay"]`` ms; fails now and then."""
    failure_rate: float = 0.1

    async def execute(self, prep_result: Any) -> str:
        delay = self.params["delay"]
        started = time.perf_counter()
        await asyncio.sleep(delay / 1000)
        if random.random() < self.failure_rate:
            raise ExecutionError(f"job with delay {delay}ms failed")
        elapsed = (time.perf_counter() - started) * 1000
        return f"Delay: {delay}ms, Actual time: {elapsed:.0f}ms"

    async def finalize(self, prep_result: Any, exec_result: str, shared: Any) -> Optional[str]:
        return exec_result

###################################################################
# Workflow
###################################################################

class DelayBatchFlow(BatchFlow):
    """One traversal per configured delay."""

    async def prepare(self, shared: Dict[str, Any]) -> Sequence[Dict[str, Any]]:
        return [{"delay": delay} for delay in shared["delays"]]

    async def finalize(self, prep_result: Any, exec_result: List[str], shared: Dict[str, Any]) -> Optional[str]:
        shared["results"] = exec_result
        return None

async def main():
    """Run the batch and report wall-clock time."""
    configure_logging()

    flow = DelayBatchFlow(SimulatedJobNode(max_retries=3, interval_ms=100), id="delays")
    shared: Dict[str, Any] = {"delays": DELAYS_MS}

    started = time.perf_counter()
    results = await flow.run(shared)
    elapsed = time.perf_counter() - started

    for line in results[:5]:
        logger.info(line)
    logger.info(f"{len(results)} jobs finished in {elapsed:.2f}s (sum of delays: {sum(DELAYS_MS) / 1000:.1f}s)")

if __name__ == "__main__":
    asyncio.run(main())
