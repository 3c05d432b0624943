import logging
from datetime import date, datetime
from typing import Any

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)


def parse_catalog_date(s: str) -> date:
    return isoparse(s).date()


def format_date(date_like: Any) -> Any:
    """Render a catalog date as e.g. "Jan 1, 2024".

    Falls back to returning the input unchanged when it cannot be parsed,
    so already-formatted or garbage values pass straight through.
    """
    try:
        if isinstance(date_like, datetime):
            d = date_like.date()
        elif isinstance(date_like, date):
            d = date_like
        else:
            d = parse_catalog_date(date_like)
        return f"{d.strftime('%b')} {d.day}, {d.year}"
    except (ValueError, TypeError, AttributeError, OverflowError):
        logger.debug("Unparseable date %r, showing as-is", date_like)
        return date_like
