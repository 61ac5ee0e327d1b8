from .num_utils import (
    format_number,
    is_close_to_int,
    is_numeric,
    parse_numeric_prefix,
    round_half_up,
    round_int,
    to_float,
    to_int,
)

__all__ = [
    "format_number",
    "is_close_to_int",
    "is_numeric",
    "parse_numeric_prefix",
    "round_half_up",
    "round_int",
    "to_float",
    "to_int",
]
