"""Base node class for the graph system.

This module defines the Node abstraction for the actiongraph runtime. A Node
represents an individual unit of work that runs a three-phase lifecycle:

1. ``prepare(shared)`` reads and validates shared state
2. ``execute(prep_result)`` does the work, without touching shared state
3. ``finalize(prep_result, exec_result, shared)`` commits results and returns
   the action label that selects the next node

Nodes are wired together with ``add_successor``. Traversal never runs the
registered node itself: ``get_successor`` hands out a fresh clone, so the same
template can appear several times in a graph (including in cycles) and be
reused across independent runs.

Typical Usage:
    - Create a subclass of Node
    - Override ``execute`` (and ``prepare``/``finalize`` as needed)
    - Connect nodes with ``add_successor(node, action)``
"""

import copy
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, model_validator

from actiongraph.core.errors import DuplicateActionError, GraphDefinitionError
from actiongraph.core.logging import get_logger, LogComponent

logger = get_logger(LogComponent.NODES)

DEFAULT_ACTION = "default"


class Node(BaseModel):
    """
    Abstract base node for graph operations.

    Attributes:
        id: Identifier used in log output (defaults to the class name)
        params: Opaque caller-supplied configuration, replaced on each step
        successors: Mapping of action labels to successor nodes
    """
    id: str = Field(default="", description="Identifier used in log output")
    params: Any = Field(default_factory=dict)
    successors: Dict[str, "Node"] = Field(default_factory=dict)

    class Config:
        arbitrary_types_allowed = True

    @model_validator(mode='after')
    def validate_node(self) -> 'Node':
        """Fall back to the class name when no id was given."""
        if not self.id:
            self.id = type(self).__name__
        return self

    def set_params(self, params: Any) -> "Node":
        """Replace the node's params wholesale."""
        self.params = params
        return self

    def add_successor(self, node: "Node", action: str = DEFAULT_ACTION) -> "Node":
        """Register ``node`` as the successor for ``action``.

        Args:
            node: Node to run when this node returns ``action``
            action: Action label, defaults to ``DEFAULT_ACTION``

        Returns:
            The successor node, so edges can be chained

        Raises:
            DuplicateActionError: If ``action`` is already registered
            GraphDefinitionError: If ``node`` is not a Node
        """
        if not isinstance(node, Node):
            raise GraphDefinitionError(
                f"Successor for action '{action}' on node {self.id} must be a Node, "
                f"got {type(node).__name__}"
            )
        if action in self.successors:
            raise DuplicateActionError(action, self.id)
        self.successors[action] = node
        logger.debug(f"Added edge: {self.id} --[{action}]--> {node.id}")
        return node

    def get_successor(self, action: str) -> Optional["Node"]:
        """Get a fresh clone of the successor registered for ``action``.

        Returns None when no edge matches, which ends the traversal.
        """
        if action not in self.successors:
            return None
        return self.successors[action].clone()

    def clone(self) -> "Node":
        """Create a fresh runtime instance of this node.

        ``params`` is deep copied; ``successors`` is a new mapping holding the
        same successor objects. Other fields are carried over as-is, so
        subclasses with mutable per-run fields should override this.
        """
        return self.model_copy(update={
            "params": copy.deepcopy(self.params),
            "successors": dict(self.successors),
        })

    async def prepare(self, shared: Any) -> Any:
        """Read and validate shared state. Override in subclasses."""
        return None

    async def execute(self, prep_result: Any) -> Any:
        """Perform the node's work. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement execute()")

    async def finalize(self, prep_result: Any, exec_result: Any, shared: Any) -> Optional[str]:
        """Commit results to shared state and choose the next action."""
        return DEFAULT_ACTION

    async def _execute(self, prep_result: Any) -> Any:
        return await self.execute(prep_result)

    async def _run(self, shared: Any) -> str:
        logger.debug(f"Node {self.id}: prepare")
        prep_result = await self.prepare(shared)
        logger.debug(f"Node {self.id}: execute")
        exec_result = await self._execute(prep_result)
        logger.debug(f"Node {self.id}: finalize")
        action = await self.finalize(prep_result, exec_result, shared)
        return DEFAULT_ACTION if action is None else action

    async def run(self, shared: Any) -> str:
        """Run prepare, execute and finalize in order.

        Args:
            shared: Mutable shared state threaded through every phase

        Returns:
            The action label returned by ``finalize``
        """
        return await self._run(shared)
