"""URI template conformance harness.

Provides:
- test vector loading (uritemplate-test JSON/YAML layout, schema-validated)
- a dynamic test registry that turns each vector into a named pytest case
- a suite runner that writes per-vector results
"""

__all__ = [
    "config",
    "conformance",
    "spec",
]
