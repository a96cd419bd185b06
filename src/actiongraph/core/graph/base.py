"""Flow Base Class

This module defines the Flow, the orchestrator of the graph system. A Flow is
itself a Node: its "work" is to traverse the sub-graph that starts at
``start``, following the action label each node returns until no successor
matches. Because it is a Node, a Flow can be the start of another Flow or a
successor anywhere in a graph.

Example:
    ```python
    # Create nodes
    number = NumberNode(value=5)
    check = CheckPositiveNode()
    add_positive = AddNode(addend=10)
    add_negative = AddNode(addend=-20)

    # Connect nodes
    number.add_successor(check)
    check.add_successor(add_positive, "positive")
    check.add_successor(add_negative, "negative")

    # Run flow
    shared = {"value": 0}
    action = await Flow(number).run(shared)
    ```
"""

from typing import Any, Dict, Optional
from pydantic import Field

from actiongraph.core.errors import UnsupportedOperationError
from actiongraph.core.logging import (
    LogComponent,
    GraphLoggingConfig,
    get_logger,
    log_verbose,
)
from actiongraph.core.graph.nodes.base.node import Node, DEFAULT_ACTION

# Get logger for graph component
logger = get_logger(LogComponent.GRAPH)

# Marks "no flow_params given"; None is a valid parameter set.
_UNSET = object()


class Flow(Node):
    """A node that orchestrates traversal of a sub-graph.

    Every step runs on a clone, so distinct runs of the same Flow never share
    node instances. The registered topology is treated as read-only once a run
    has started.

    Attributes:
        start: Entry node of the sub-graph
        logging_config: Controls how transitions are logged
    """
    start: Node
    logging_config: GraphLoggingConfig = Field(
        default_factory=GraphLoggingConfig
    )

    def __init__(self, start: Optional[Node] = None, **data):
        if start is not None:
            data["start"] = start
        super().__init__(**data)

    def get_start_node(self) -> Node:
        """Get a fresh clone of the start node."""
        return self.start.clone()

    async def orchestrate(self, shared: Any, flow_params: Any = _UNSET) -> str:
        """Traverse the graph from the start node until no successor matches.

        Args:
            shared: Shared state handed to every node
            flow_params: Params for every step; the flow's own params if omitted

        Returns:
            The last action label produced
        """
        params = self.params if flow_params is _UNSET else flow_params
        current: Optional[Node] = self.get_start_node()
        log_verbose(logger, f"Flow {self.id}: starting at node {current.id}")

        action = DEFAULT_ACTION
        while current is not None:
            current.set_params(params)
            try:
                action = await current._run(shared)
            except Exception as e:
                logger.error(f"Flow {self.id}: error in node {current.id}: {e}")
                raise

            next_node = current.get_successor(action)
            if next_node is not None:
                self._log_transition(f"{current.id} --[{action}]--> {next_node.id}")
            else:
                self._log_transition(f"{current.id} --[{action}]--> (end)")
            current = next_node

        return action

    def _log_transition(self, message: str) -> None:
        if self.logging_config.show_node_transitions:
            logger.step(f"Flow {self.id}: {message}")
        else:
            log_verbose(logger, f"Flow {self.id}: {message}")

    async def prepare(self, shared: Any) -> Dict[str, Any]:
        return {}

    async def execute(self, prep_result: Any) -> Any:
        raise UnsupportedOperationError("Flow node does not support direct execution")

    async def finalize(self, prep_result: Any, exec_result: Any, shared: Any) -> Optional[str]:
        return DEFAULT_ACTION

    async def _run(self, shared: Any) -> str:
        prep_result = await self.prepare(shared)
        await self.orchestrate(shared)
        action = await self.finalize(prep_result, None, shared)
        return DEFAULT_ACTION if action is None else action
