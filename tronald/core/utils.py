from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

# Wire format of every timestamp exchanged with the API: no timezone, no fractions.
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def to_str(x: Any) -> Optional[str]:
    if x is None or isinstance(x, (dict, list)):
        return None

    if isinstance(x, bool):
        return "true" if x else "false"

    return str(x)


def parse_date(src: Any, in_fmt: str = DATE_FORMAT) -> Optional[datetime]:
    if not isinstance(src, str) or not src:
        return None

    try:
        return datetime.strptime(src, in_fmt)
    except ValueError:
        return None


def format_date(dt: Optional[datetime], out_fmt: str = DATE_FORMAT) -> Optional[str]:
    if dt is None:
        return None

    return dt.strftime(out_fmt)
