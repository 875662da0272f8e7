from linewrap.temporal.activities.wrap import WrapTextInput, WrapTextOutput, wrap_text

__all__ = [
    'WrapTextInput',
    'WrapTextOutput',
    'wrap_text',
]
