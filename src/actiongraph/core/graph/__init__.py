"""Graph package initialization.

Exposes core graph components and helpers for building workflows.
"""

from actiongraph.core.graph.base import Flow
from actiongraph.core.graph.batch import BatchFlow
from actiongraph.core.graph.nodes import (
    Node,
    RetryNode,
    RetryConfig,
    DEFAULT_ACTION,
)

__all__ = [
    # Core classes
    "Flow",
    "BatchFlow",
    "Node",
    "RetryNode",

    # Configuration and constants
    "RetryConfig",
    "DEFAULT_ACTION",
]
