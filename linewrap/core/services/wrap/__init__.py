from linewrap.core.services.wrap.schemas import Frame, WrapRequest, WrapResult
from linewrap.core.services.wrap.service import (
    DEFAULT_MAX_LINE_LENGTH,
    LINE_DELIMITERS,
    LineWrapService,
    get_line_wrap_service,
    split_segments,
    trim_trailing_whitespace,
    wrap,
)

__all__ = [
    'DEFAULT_MAX_LINE_LENGTH',
    'LINE_DELIMITERS',
    'Frame',
    'LineWrapService',
    'WrapRequest',
    'WrapResult',
    'get_line_wrap_service',
    'split_segments',
    'trim_trailing_whitespace',
    'wrap',
]
