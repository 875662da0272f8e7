from linewrap.temporal.workflows.line_wrap import LineWrapInput, LineWrapOutput, LineWrapProgress, LineWrapWorkflow

__all__ = [
    'LineWrapInput',
    'LineWrapOutput',
    'LineWrapProgress',
    'LineWrapWorkflow',
]
