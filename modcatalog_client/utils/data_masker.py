"""
Data masker utility for keeping the API key out of logs and reprs.

The credential travels in the ``x-api-key`` header and is part of every cache
key; anything logged goes through this masker first.
"""

from typing import Any, Dict, Optional, Set


class DataMasker:
    """Static class for masking credentials."""

    MASKED_VALUE = "***MASKED***"

    # Normalized (lowercase, no separators) names that carry credentials
    _sensitive_fields: Set[str] = {
        "apikey",
        "xapikey",
        "key",
        "token",
        "secret",
        "password",
        "authorization",
        "cookie",
    }

    @classmethod
    def is_sensitive_field(cls, key: str) -> bool:
        """
        Check if a field or header name carries a credential.

        Args:
            key: Field name to check

        Returns:
            True if the field is sensitive
        """
        normalized_key = key.lower().replace("_", "").replace("-", "")
        if normalized_key in cls._sensitive_fields:
            return True
        return any(field in normalized_key for field in cls._sensitive_fields)

    @classmethod
    def mask_sensitive_data(cls, data: Any) -> Any:
        """
        Return a masked copy of dicts/lists; primitives are returned unchanged.
        """
        if isinstance(data, list):
            return [cls.mask_sensitive_data(item) for item in data]
        if not isinstance(data, dict):
            return data

        masked: Dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(key, str) and cls.is_sensitive_field(key):
                masked[key] = cls.MASKED_VALUE
            else:
                masked[key] = cls.mask_sensitive_data(value)
        return masked

    @classmethod
    def mask_value(cls, value: Optional[str], show_last: int = 0) -> str:
        """
        Mask a single string such as an API key.

        Args:
            value: String value to mask
            show_last: Number of trailing characters left visible

        Returns:
            Masked string; empty values are shown as an empty string
        """
        if not value:
            return ""
        if len(value) <= show_last * 2:
            return cls.MASKED_VALUE
        last = value[-show_last:] if show_last > 0 else ""
        return f"{'*' * 8}{last}"
