from .timespan import format_timespan, parse_timespan

__all__ = ['format_timespan', 'parse_timespan']
