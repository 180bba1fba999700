"""
Custom exceptions for the GW2 API client.

Unrecognized type tags and unparsable derived values are not errors; they
degrade to Unknown variants or unset fields. Only transport failures and
malformed primary identifiers are raised.
"""

from typing import Any


class GW2ClientError(Exception):
    pass


class APIError(GW2ClientError):
    pass


class ConversionError(GW2ClientError):
    def __init__(self, record: Any, reason: str):
        self.record = record
        self.reason = reason
        super().__init__(f"Cannot convert record {record!r}: {reason}")
