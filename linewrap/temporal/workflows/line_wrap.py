"""Line Wrap Workflow.

Wraps a batch of texts, one wrap_text activity per text, in input order.

Example:
    result = await client.execute_workflow(
        LineWrapWorkflow.run,
        LineWrapInput(texts=['A long paragraph ...'], max_length=40),
        id='wrap-123',
        task_queue='linewrap-queue',
    )
    print(result.texts[0])
"""

from datetime import timedelta

from pydantic import BaseModel, Field
from temporalio import workflow
from temporalio.common import RetryPolicy

with workflow.unsafe.imports_passed_through():
    from linewrap.temporal.activities.wrap import WrapTextInput, wrap_text

# Wrapping is deterministic, so a failure is retried only a few times
WRAP_RETRY = RetryPolicy(initial_interval=timedelta(seconds=1), maximum_attempts=3)


class LineWrapInput(BaseModel):
    """Input for LineWrap workflow."""

    texts: list[str] = Field(..., description='Texts to wrap, each independently')
    max_length: int | None = Field(None, description='Max characters per line (None = configured default)')


class LineWrapOutput(BaseModel):
    """Output from LineWrap workflow."""

    texts: list[str] = Field(default_factory=list, description='Wrapped texts, in input order')
    line_counts: list[int] = Field(default_factory=list, description='Number of lines in each wrapped text')


class LineWrapProgress(BaseModel):
    """How far through the batch the workflow is."""

    wrapped: int = Field(0, description='Texts wrapped so far')
    total: int = Field(0, description='Texts in the batch')


@workflow.defn
class LineWrapWorkflow:
    """Wrap each input text with the wrap_text activity."""

    def __init__(self) -> None:
        self._progress = LineWrapProgress()

    @workflow.query
    def get_progress(self) -> LineWrapProgress:
        return self._progress

    @workflow.run
    async def run(self, input: LineWrapInput) -> LineWrapOutput:
        self._progress.total = len(input.texts)
        output = LineWrapOutput()

        for text in input.texts:
            result = await workflow.execute_activity(
                wrap_text,
                WrapTextInput(text=text, max_length=input.max_length),
                start_to_close_timeout=timedelta(minutes=1),
                retry_policy=WRAP_RETRY,
            )
            output.texts.append(result.text)
            output.line_counts.append(len(result.lines))
            self._progress.wrapped += 1

        workflow.logger.info(f'Wrapped {self._progress.total} texts')
        return output
