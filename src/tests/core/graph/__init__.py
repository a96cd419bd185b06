"""Test suite for the actiongraph graph runtime.

This package contains tests for the graph runtime, organized into the
following structure:

1. Flow Tests (test_flow.py)
   - Chained, branching and cyclic traversal
   - Nested flows
   - Parameter propagation
   - Error propagation

2. Batch Flow Tests (test_batch.py)
   - Concurrent fan-out
   - Ordered aggregation
   - Failure handling

3. Node Tests (nodes/)
   - Lifecycle and successor registration
   - Clone semantics
   - Retry wrapper

Shared test nodes live in math_nodes.py.
"""
