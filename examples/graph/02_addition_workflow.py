"""
Addition Workflow Example

This example demonstrates:
1. Building a flow from a factory function
2. Validating shared state in ``prepare``
3. Committing results (and which node produced them) in ``finalize``

Set NUM1 / NUM2 in the environment to change the inputs.
"""

import asyncio
import os
from typing import Any, Dict, Optional
from pydantic import BaseModel

from actiongraph import Node, Flow, DEFAULT_ACTION, NodeValidationError, ActionGraphError
from actiongraph.core.logging import configure_logging, LogComponent, get_logger

logger = get_logger(LogComponent.WORKFLOW)

###################################################################
# Models
###################################################################

class AdditionInput(BaseModel):
    """The two operands read from shared state."""
    num1: float
    num2: float

###################################################################
# Nodes
###################################################################

class LocalAdditionNode(Node):
    """Adds ``num1`` and ``num2`` in-process."""

    async def prepare(self, shared: Dict[str, Any]) -> AdditionInput:
        if not all(isinstance(shared.get(key), (int, float)) for key in ("num1", "num2")):
            raise NodeValidationError("Input state requires num1 and num2 to be numbers.")
        return AdditionInput(num1=shared["num1"], num2=shared["num2"])

    async def execute(self, prep_result: AdditionInput) -> float:
        total = prep_result.num1 + prep_result.num2
        logger.debug(f"Calculated sum: {total}")
        return total

    async def finalize(self, prep_result: AdditionInput, exec_result: float, shared: Dict[str, Any]) -> Optional[str]:
        shared["result"] = exec_result
        shared["last_node"] = self.id
        return DEFAULT_ACTION

###################################################################
# Workflow
###################################################################

def create_addition_flow() -> Flow:
    """Create a single-step addition flow."""
    flow = Flow(LocalAdditionNode(id="local_addition"), id="addition")
    logger.info("Addition flow created.")
    return flow

async def main():
    """Run the addition workflow."""
    configure_logging()

    shared: Dict[str, Any] = {
        "num1": float(os.getenv("NUM1", "5")),
        "num2": float(os.getenv("NUM2", "10")),
    }

    try:
        action = await create_addition_flow().run(shared)
    except ActionGraphError as e:
        logger.error(f"Flow execution failed: {e}")
        raise

    logger.info(f"Final action: {action}")
    logger.info(f"{shared['num1']} + {shared['num2']} = {shared['result']} (from {shared['last_node']})")

if __name__ == "__main__":
    asyncio.run(main())
