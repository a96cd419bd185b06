"""
Batch Flow Implementation

A BatchFlow runs the same flow topology once per parameter set returned by its
``prepare`` phase. All traversals are launched at once (no concurrency cap)
and interleave on the event loop; results come back in input order no matter
which traversal finishes first.

Example:
    ```python
    class ResizeImages(BatchFlow):
        async def prepare(self, shared):
            return [{"path": p} for p in shared["paths"]]

    results = await ResizeImages(ResizeNode()).run(shared)
    ```
"""

import asyncio
from typing import Any, List, Sequence

from actiongraph.core.logging import get_logger, LogComponent
from actiongraph.core.graph.base import Flow
from actiongraph.core.graph.nodes.base.node import DEFAULT_ACTION

logger = get_logger(LogComponent.BATCH)


class BatchFlow(Flow):
    """Flow that fans out one concurrent traversal per parameter set.

    Traversals share nothing but the shared-state object handed out by
    ``partition_shared``. Nodes that mutate shared state need a variant that
    returns a separate object per traversal.
    """

    async def prepare(self, shared: Any) -> Sequence[Any]:
        """Return the ordered parameter sets. Override in subclasses."""
        return []

    def partition_shared(self, shared: Any, index: int, params: Any) -> Any:
        """Shared state for the traversal at ``index``. Defaults to ``shared``."""
        return shared

    async def _run_batch(self, shared: Any):
        batch_params = list(await self.prepare(shared))
        logger.info(f"BatchFlow {self.id}: launching {len(batch_params)} traversals")

        results: List[Any] = await asyncio.gather(*(
            self.orchestrate(self.partition_shared(shared, index, params), params)
            for index, params in enumerate(batch_params)
        ))

        logger.info(f"BatchFlow {self.id}: {len(results)} traversals completed")
        action = await self.finalize(batch_params, results, shared)
        return results, DEFAULT_ACTION if action is None else action

    async def _run(self, shared: Any) -> str:
        _, action = await self._run_batch(shared)
        return action

    async def run(self, shared: Any) -> List[Any]:
        """Run every traversal and return their final actions in input order."""
        results, _ = await self._run_batch(shared)
        return results
