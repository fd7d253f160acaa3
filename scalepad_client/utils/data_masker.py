"""
Data masker utility for client-side sensitive data protection.

Masks sensitive fields in structured log arguments and redacts API keys that
appear inside free-text strings, so nothing secret reaches a log sink.
"""

import re
from typing import Any, Set


class DataMasker:
    """Static class for masking sensitive data."""

    MASKED_VALUE = "***REDACTED***"

    # ScalePad API keys: dash-separated groups of 8 hex characters
    _API_KEY_PATTERN = re.compile(
        r"\b[a-f0-9]{8}-[a-f0-9]{8}-[a-f0-9]{8}-[a-f0-9]{8}(?:-[a-f0-9]{8})*\b",
        re.IGNORECASE,
    )

    # Set of sensitive field names (normalized)
    _sensitive_fields: Set[str] = {
        "password",
        "secret",
        "token",
        "key",
        "authorization",
        "cookie",
    }

    @classmethod
    def is_sensitive_field(cls, key: str) -> bool:
        """
        Check if a field name indicates sensitive data.

        Args:
            key: Field name to check

        Returns:
            True if field is sensitive, False otherwise
        """
        normalized_key = key.lower().replace("_", "").replace("-", "")
        return any(sensitive in normalized_key for sensitive in cls._sensitive_fields)

    @classmethod
    def redact_string(cls, value: str) -> str:
        """Replace API-key-shaped substrings with the masked marker."""
        return cls._API_KEY_PATTERN.sub(cls.MASKED_VALUE, value)

    @classmethod
    def mask_sensitive_data(cls, data: Any) -> Any:
        """
        Mask sensitive data in objects, arrays, or primitives.

        Returns a masked copy without modifying the original.
        Recursively processes nested objects and arrays.

        Args:
            data: Data to mask (dict, list, str, or other primitive)

        Returns:
            Masked copy of the data
        """
        if isinstance(data, str):
            return cls.redact_string(data)

        if isinstance(data, (list, tuple)):
            return [cls.mask_sensitive_data(item) for item in data]

        if isinstance(data, dict):
            masked: dict[Any, Any] = {}
            for key, value in data.items():
                if isinstance(key, str) and cls.is_sensitive_field(key):
                    masked[key] = cls.MASKED_VALUE
                else:
                    masked[key] = cls.mask_sensitive_data(value)
            return masked

        return data
