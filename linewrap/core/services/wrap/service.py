"""Line wrapping.

Breaks text into lines no longer than a maximum length, preferring to break
at spaces. Existing CR, LF and FF characters split the input into segments
that are wrapped independently and rejoined with a single newline.
"""

import re

from linewrap.core.configs import app_config
from linewrap.core.deps import logger
from linewrap.core.services.wrap.schemas import Frame, WrapRequest, WrapResult

DEFAULT_MAX_LINE_LENGTH = 60

LINE_DELIMITERS = '\r\n\f'

# Every control character up to and including the space counts as whitespace
_BLANKS = ''.join(chr(code) for code in range(ord(' ') + 1))

_SEGMENT_RE = re.compile(f'[^{re.escape(LINE_DELIMITERS)}]+')

# One break per delimiter; CRLF counts as a single break
_LINE_BREAK_RE = re.compile(r'\r\n|[\r\n\f]')


def trim_trailing_whitespace(text: str | None) -> str | None:
    """Remove trailing whitespace (any character <= space) from text.

    Returns None for None and an empty string for all-whitespace input.
    """
    if text is None:
        return None
    return text.rstrip(_BLANKS)


def split_segments(text: str) -> list[str]:
    """Split text on runs of line delimiters, dropping empty fields.

    >>> split_segments('one\\r\\n\\ntwo\\fthree')
    ['one', 'two', 'three']
    """
    return _SEGMENT_RE.findall(text)


def _skip_spaces(text: str, index: int) -> int:
    """Return the first index at or after ``index`` that is not a space."""
    length = len(text)
    while index < length and text[index] == ' ':
        index += 1
    return index


def _segment_line(line: str, lines: list[str], max_length: int) -> None:
    """Greedily break one over-long segment at spaces, appending to ``lines``.

    The segment must contain at least one space and be longer than
    ``max_length``. A word wider than ``max_length`` is emitted whole, up to
    the next space.
    """
    text = trim_trailing_whitespace(line)
    if not text:
        lines.append('')
        return

    frame = Frame()

    lead = _skip_spaces(text, 0)
    if lead >= max_length:
        # Leading run of spaces fills a line on its own; the rest of the run is dropped
        lines.append(text[:max_length])
        frame.start = lead

    frame.end = frame.start
    next_space = text.find(' ', lead)

    while next_space != -1:
        current_length = next_space - frame.start

        if current_length == max_length:
            lines.append(trim_trailing_whitespace(text[frame.start : next_space]))
            frame.start = _skip_spaces(text, next_space)
            frame.end = frame.start
        elif current_length > max_length:
            if frame.start == frame.end:
                # No earlier break point: the word itself is too long
                lines.append(trim_trailing_whitespace(text[frame.start : next_space]))
                frame.start = next_space
            else:
                lines.append(trim_trailing_whitespace(text[frame.start : frame.end]))
                frame.start = frame.end
            frame.start = _skip_spaces(text, frame.start)
            frame.end = frame.start
        else:
            frame.end = next_space

        # Words after a carried-over break are measured again from the new frame start
        next_space = text.find(' ', frame.end + 1)

    if frame.start == frame.end:
        lines.append(trim_trailing_whitespace(text[frame.start :]))
    else:
        lines.append(trim_trailing_whitespace(text[frame.start : frame.end]))
        lines.append(text[frame.end :].strip(_BLANKS))


def wrap(text: str | None, max_length: int = DEFAULT_MAX_LINE_LENGTH) -> str:
    """Insert line breaks so no line is longer than ``max_length``.

    Lines are broken at the last space that keeps them within the limit.
    A segment with no spaces, or a single word wider than the limit, is kept
    whole. Every output line ends with a newline.

    Text that already fits, or any ``max_length`` below 1, is returned
    unchanged (not even trimmed). None yields an empty string.

    Args:
        text: Text to wrap
        max_length: Maximum line length

    Returns:
        Wrapped text
    """
    if text is None:
        return ''

    if max_length < 1 or len(text) <= max_length:
        return text

    lines: list[str] = []
    for segment in split_segments(text):
        if len(segment) <= max_length or ' ' not in segment:
            lines.append(segment)
        else:
            _segment_line(segment, lines, max_length)

    return ''.join(f'{line}\n' for line in lines)


class LineWrapService:
    """Stateless wrapping service with a configured default line length."""

    def __init__(self, default_max_length: int | None = None) -> None:
        if default_max_length is None:
            default_max_length = app_config.WRAP_MAX_LINE_LENGTH
        self.default_max_length = default_max_length

    def wrap(self, request: WrapRequest) -> WrapResult:
        """Wrap the requested text and describe the result."""
        max_length = self.default_max_length if request.max_length is None else request.max_length
        output = wrap(request.text, max_length)
        wrapped = request.text is not None and 0 < max_length < len(request.text)

        if wrapped:
            # Drop the empty field after the final terminator
            lines = output.split('\n')[:-1]
        else:
            lines = _LINE_BREAK_RE.split(output) if output else []

        logger.debug(
            'text_wrapped',
            input_length=len(request.text or ''),
            max_length=max_length,
            wrapped=wrapped,
            line_count=len(lines),
        )
        return WrapResult(text=output, lines=lines, max_length=max_length, wrapped=wrapped)


def get_line_wrap_service(default_max_length: int | None = None) -> LineWrapService:
    """Factory function to get a line wrap service instance.

    Args:
        default_max_length: Length used when a request omits one (default: WRAP_MAX_LINE_LENGTH)

    Returns:
        LineWrapService instance
    """
    return LineWrapService(default_max_length)
