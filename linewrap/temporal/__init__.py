"""Temporal surface for line wrapping.

- activities.wrap: the wrap_text activity
- workflows.line_wrap: LineWrapWorkflow, wraps a batch of texts
- worker: serves both on the configured task queue (python -m linewrap.temporal.worker)
"""
