"""Terminal interaction for togglsum."""

from .selector import RangeSelector

__all__ = ['RangeSelector']
