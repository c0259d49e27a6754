"""Utility modules for togglsum."""

from .date_utils import iso_date, fetch_window, parse_timestamp
from .format_utils import Duration, decode_duration, encode_duration, format_seconds, format_clock
from .file_utils import CredentialStore, CredentialResult, CredentialStatus

__all__ = [
    'iso_date', 'fetch_window', 'parse_timestamp',
    'Duration', 'decode_duration', 'encode_duration', 'format_seconds', 'format_clock',
    'CredentialStore', 'CredentialResult', 'CredentialStatus'
]
