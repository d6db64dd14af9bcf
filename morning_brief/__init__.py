"""
Morning Brief - newsletter takeaways for a daily briefing page.

This package reads a morning briefing JSON payload, distills its
newsletters into a few topic takeaways, and renders an HTML/Markdown
digest.

Main entry point is the CLI via `morning-brief run` command.

Example:
    $ morning-brief run -i briefing.json -o out/
"""

__all__ = ["__version__", "NewsletterRecord", "Takeaway", "parse_newsletters", "select_takeaways"]
__version__ = "0.1.0"

from .core.takeaways import select_takeaways
from .core.types import NewsletterRecord, Takeaway
from .input.briefing_parser import parse_newsletters
