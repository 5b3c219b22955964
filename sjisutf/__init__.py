"""Decoding of Shift_JIS and conversions between UTF-8, UTF-16 and UTF-32."""

__version__ = "0.1.0"
__all__ = ["sjis", "utf", "table_up_a", "table_up_b", "table_down"]