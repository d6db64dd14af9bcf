"""Input parsers for briefing payloads."""

from .briefing_parser import parse_executive_summary, parse_newsletters, unwrap_briefing

__all__ = ["parse_executive_summary", "parse_newsletters", "unwrap_briefing"]
