"""
Branching and Looping Workflow Example

This example demonstrates:
1. Routing on action labels ("positive" / "negative")
2. A cycle that revisits the same node until a condition flips
3. Shared state as the only channel between nodes

The workflow:
- Seeds a value
- Subtracts a step while the value is positive
- Reports the final value once it turns negative
"""

import asyncio
from typing import Any, Dict, Optional

from actiongraph import Node, Flow, DEFAULT_ACTION, NodeValidationError
from actiongraph.core.logging import (
    configure_logging,
    LogLevel,
    LogComponent,
    GraphLoggingConfig,
    get_logger
)

# Get workflow logger
logger = get_logger(LogComponent.WORKFLOW)

###################################################################
# Nodes
###################################################################

class SeedNode(Node):
    """Writes the starting value into shared state."""
    value: int

    async def execute(self, prep_result: Any) -> int:
        return self.value

    async def finalize(self, prep_result: Any, exec_result: int, shared: Dict[str, Any]) -> Optional[str]:
        shared["value"] = exec_result
        return DEFAULT_ACTION

class CheckSignNode(Node):
    """Routes on the sign of the current value."""

    async def prepare(self, shared: Dict[str, Any]) -> int:
        if not isinstance(shared.get("value"), int):
            raise NodeValidationError("Shared state does not have an integer 'value'")
        return shared["value"]

    async def execute(self, value: int) -> int:
        return value

    async def finalize(self, prep_result: int, exec_result: int, shared: Dict[str, Any]) -> Optional[str]:
        return "positive" if exec_result >= 0 else "negative"

class StepDownNode(Node):
    """Subtracts ``step`` from the current value."""
    step: int

    async def prepare(self, shared: Dict[str, Any]) -> int:
        return shared["value"]

    async def execute(self, value: int) -> int:
        return value - self.step

    async def finalize(self, prep_result: int, exec_result: int, shared: Dict[str, Any]) -> Optional[str]:
        logger.info(f"{prep_result} - {self.step} = {exec_result}")
        shared["value"] = exec_result
        shared["steps"] = shared.get("steps", 0) + 1
        return DEFAULT_ACTION

class ReportNode(Node):
    """Logs the final value."""

    async def prepare(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        return shared

    async def execute(self, prep_result: Dict[str, Any]) -> str:
        return f"Stopped at {prep_result['value']} after {prep_result.get('steps', 0)} steps"

    async def finalize(self, prep_result: Any, exec_result: str, shared: Dict[str, Any]) -> Optional[str]:
        logger.info(exec_result)
        return DEFAULT_ACTION

###################################################################
# Workflow
###################################################################

def create_countdown_flow(start: int, step: int) -> Flow:
    """Build seed -> check -(positive)-> step_down -> check ... -(negative)-> report."""
    seed = SeedNode(id="seed", value=start)
    check = CheckSignNode(id="check")
    step_down = StepDownNode(id="step_down", step=step)

    seed.add_successor(check)
    check.add_successor(step_down, "positive")
    check.add_successor(ReportNode(id="report"), "negative")
    step_down.add_successor(check)

    return Flow(
        seed,
        id="countdown",
        logging_config=GraphLoggingConfig(show_node_transitions=True)
    )

async def main():
    """Run the countdown workflow."""
    configure_logging(default_level=LogLevel.INFO)

    shared: Dict[str, Any] = {}
    action = await create_countdown_flow(start=10, step=3).run(shared)
    logger.info(f"Final action: {action}, final state: {shared}")

if __name__ == "__main__":
    asyncio.run(main())
