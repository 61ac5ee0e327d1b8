# No dependencies
from enum import Enum
from typing import Optional, Union
import warnings


class RenderFormat(str, Enum):
    COMMA = "COMMA"
    CSS = "CSS"
    PERCENT = "PERCENT"


FormatLike = Union[RenderFormat, str, None]


def resolve_format(format: FormatLike) -> Optional[RenderFormat]:
    """
    Map a format token to a RenderFormat, or None for the plain default.

    Tokens compare by exact string identity, so "COMMA" works but "comma"
    does not. Unknown tokens fall back to the plain default with a warning.
    """
    if format is None:
        return None
    try:
        return RenderFormat(format)
    except ValueError:
        warnings.warn(f"Unknown render format: {format!r}, defaulting to plain")
        return None
