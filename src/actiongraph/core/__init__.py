"""Core modules for actiongraph."""

from actiongraph.core.logging import configure_logging, LogLevel, LogComponent
from actiongraph.core.graph import (
    Node,
    Flow,
    BatchFlow,
    RetryNode,
    RetryConfig,
    DEFAULT_ACTION,
)

__all__ = [
    'Node',
    'Flow',
    'BatchFlow',
    'RetryNode',
    'RetryConfig',
    'DEFAULT_ACTION',
    'configure_logging',
    'LogLevel',
    'LogComponent'
]
