"""
Retry Node Implementation

This module provides the RetryNode class, a node whose execute phase is
retried on failure. Domain failures are retried; validation and graph
definition errors propagate on the first attempt, unmodified. Only execute
is wrapped: prepare and finalize run exactly once per step, which is why
execute must not depend on shared state except through its ``prep_result``.

Example:
    ```python
    class FetchNode(RetryNode):
        async def execute(self, prep_result):
            return await fetch(prep_result["url"])

    node = FetchNode(max_retries=3, interval_ms=250)
    action = await node.run(shared)
    ```
"""

import asyncio
from typing import Any
from pydantic import BaseModel, Field

from actiongraph.core.errors import (
    GraphDefinitionError,
    NodeValidationError,
    RetryExhaustedError,
    UnsupportedOperationError,
)
from actiongraph.core.logging import get_logger, LogComponent
from actiongraph.core.graph.nodes.base.node import Node

logger = get_logger(LogComponent.RETRY)


class RetryConfig(BaseModel):
    """Configuration for retried execution."""
    max_retries: int = Field(default=1, ge=1, description="Total attempts allowed")
    interval_ms: float = Field(default=0, ge=0, description="Delay between attempts in milliseconds")


class RetryNode(Node):
    """
    Node whose execute phase is retried up to ``max_retries`` times.

    Attributes:
        max_retries: Total number of execute attempts (at least 1)
        interval_ms: Non-blocking delay between attempts, in milliseconds
    """
    max_retries: int = Field(default=1, ge=1)
    interval_ms: float = Field(default=0, ge=0)

    @classmethod
    def from_config(cls, config: RetryConfig, **data: Any) -> "RetryNode":
        """Build a node from a RetryConfig plus any subclass fields."""
        return cls(max_retries=config.max_retries, interval_ms=config.interval_ms, **data)

    @property
    def retry_config(self) -> RetryConfig:
        return RetryConfig(max_retries=self.max_retries, interval_ms=self.interval_ms)

    async def _execute(self, prep_result: Any) -> Any:
        attempt = 0
        while True:
            try:
                return await self.execute(prep_result)
            except (NodeValidationError, GraphDefinitionError, UnsupportedOperationError):
                raise
            except Exception as e:
                attempt += 1
                logger.warning(
                    f"Node {self.id}: attempt {attempt}/{self.max_retries} failed: {e}"
                )
                if attempt >= self.max_retries:
                    logger.error(f"Node {self.id}: giving up after {attempt} attempts")
                    raise RetryExhaustedError(attempt) from e
            await asyncio.sleep(self.interval_ms / 1000)
