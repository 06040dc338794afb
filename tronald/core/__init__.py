from .path import PathResolver, PathSyntaxError
from .mapping import RecordMapper
from .utils import DATE_FORMAT, parse_date, format_date, to_str

__all__ = [
    "PathResolver",
    "PathSyntaxError",
    "RecordMapper",
    "DATE_FORMAT",
    "parse_date",
    "format_date",
    "to_str",
]
