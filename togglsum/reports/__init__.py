"""Report modules for togglsum."""

from .time_entry import TimeEntry
from .summary import Summary, fold_entries, format_summary, selection_table, RATE_PER_HOUR, CURRENCY_SYMBOL

__all__ = ['TimeEntry', 'Summary', 'fold_entries', 'format_summary', 'selection_table', 'RATE_PER_HOUR', 'CURRENCY_SYMBOL']
