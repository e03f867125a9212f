"""
traceview

Derived-state selector pipeline for a distributed-tracing UI.
Turns immutable store snapshots into render-ready view models.
"""

__version__ = "0.1.0"
