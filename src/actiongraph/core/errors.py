"""Error taxonomy for graph definition and execution.

Only the retry wrapper recovers from any of these; everything else propagates
unmodified to whoever called ``run``.
"""


class ActionGraphError(Exception):
    """Base class for all actiongraph errors."""


class GraphDefinitionError(ActionGraphError, ValueError):
    """The graph was assembled incorrectly."""


class DuplicateActionError(GraphDefinitionError):
    """An action label was registered twice on the same node."""

    def __init__(self, action: str, node_id: str = ""):
        self.action = action
        self.node_id = node_id
        owner = f" on node {node_id}" if node_id else ""
        super().__init__(f"Action '{action}' already exists{owner}")


class NodeValidationError(ActionGraphError, ValueError):
    """A node rejected malformed shared state or parameters."""


class ExecutionError(ActionGraphError, RuntimeError):
    """A node's execute phase failed for domain reasons."""


class RetryExhaustedError(ExecutionError):
    """A retry node's execute phase failed on every attempt."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Max retries reached after {attempts} attempts")


class UnsupportedOperationError(ActionGraphError, NotImplementedError):
    """The operation is not available on this node variant."""
