"""Text wrapping activities.

Wraps text to a maximum line length using the line wrap service. The work is
pure CPU on in-memory strings, so no heartbeats are needed.
"""

from pydantic import BaseModel, Field
from temporalio import activity

from linewrap.core.services.wrap import WrapRequest, get_line_wrap_service


class WrapTextInput(BaseModel):
    """Input for wrap text activity."""

    text: str | None = Field(..., description='Text to wrap')
    max_length: int | None = Field(None, description='Max characters per line (None = configured default)')


class WrapTextOutput(BaseModel):
    """Output from wrap text activity."""

    text: str = Field(..., description='Wrapped text')
    lines: list[str] = Field(default_factory=list, description='Wrapped lines')
    max_length: int = Field(..., description='Max characters per line that was applied')
    wrapped: bool = Field(..., description='Whether any wrapping was performed')


@activity.defn
async def wrap_text(input: WrapTextInput) -> WrapTextOutput:
    """Wrap text so no line exceeds the maximum length."""
    activity.logger.info(f'Wrapping {len(input.text or "")} characters (max_length={input.max_length})')

    service = get_line_wrap_service()
    result = service.wrap(WrapRequest(text=input.text, max_length=input.max_length))

    activity.logger.info(f'Wrapped into {len(result.lines)} lines')

    return WrapTextOutput(
        text=result.text,
        lines=result.lines,
        max_length=result.max_length,
        wrapped=result.wrapped,
    )
