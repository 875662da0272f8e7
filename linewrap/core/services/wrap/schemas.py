"""Line wrap service schemas.

Pydantic models for the service contract plus the frame state used while
segmenting a single over-long line.
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass
class Frame:
    """Candidate output line under construction, as a half-open index range.

    ``start`` is the first character not yet emitted. ``end`` is the last
    confirmed space boundary that keeps the line within the length budget.
    """

    start: int = 0
    end: int = 0


class WrapRequest(BaseModel):
    """Input for a wrap operation."""

    text: str | None = Field(..., description='Text to wrap (None yields an empty result)')
    max_length: int | None = Field(
        None,
        description='Maximum line length (None = configured default, < 1 disables wrapping)',
    )


class WrapResult(BaseModel):
    """Output from a wrap operation."""

    text: str = Field(..., description='Wrapped text, every line terminated by a newline')
    lines: list[str] = Field(
        default_factory=list,
        description='Output lines without terminators (CR, LF, CRLF and FF all end a line)',
    )
    max_length: int = Field(..., description='Maximum line length that was applied')
    wrapped: bool = Field(..., description='False when the input was returned unchanged')
