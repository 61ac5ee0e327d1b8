def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Six lowercase hex digits, two per channel, without a leading ``#``."""
    return f"{r:02x}{g:02x}{b:02x}"
