"""Security utilities for the Kraken client."""

from .mask import mask, mask_body, mask_headers, safe_for_log

__all__ = ["mask", "mask_body", "mask_headers", "safe_for_log"]
