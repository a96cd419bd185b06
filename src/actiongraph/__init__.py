"""Actiongraph - action-keyed graph orchestration runtime."""

from actiongraph.core import (
    Node,
    Flow,
    BatchFlow,
    RetryNode,
    RetryConfig,
    DEFAULT_ACTION,
    configure_logging,
    LogLevel,
    LogComponent,
)
from actiongraph.core.errors import (
    ActionGraphError,
    GraphDefinitionError,
    DuplicateActionError,
    NodeValidationError,
    ExecutionError,
    RetryExhaustedError,
    UnsupportedOperationError,
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
    'LogComponent',
    'ActionGraphError',
    'GraphDefinitionError',
    'DuplicateActionError',
    'NodeValidationError',
    'ExecutionError',
    'RetryExhaustedError',
    'UnsupportedOperationError',
]
