"""Node package initialization.

Exposes node types for building workflows.
"""

from actiongraph.core.graph.nodes.base.node import Node, DEFAULT_ACTION
from actiongraph.core.graph.nodes.retry import RetryNode, RetryConfig

__all__ = [
    # Base node types
    "Node",
    "RetryNode",

    # Configuration and constants
    "RetryConfig",
    "DEFAULT_ACTION",
]
