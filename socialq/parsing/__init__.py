"""Natural-language log parsing and sentiment scoring."""

from socialq.parsing.log_parser import LogParser, parse_log_entry
from socialq.parsing.sentiment import compute_sentiment

__all__ = [
    "LogParser",
    "compute_sentiment",
    "parse_log_entry",
]
