from __future__ import annotations
import re
from typing import Any, Optional


class PathSyntaxError(ValueError):
    pass


class PathResolver:
    """
    Resolve dotted paths into decoded JSON (nested dict/list structures).

    Supported selectors per segment:
      - key                  e.g. quote_id
      - [N]                  index
      - ?[N]                 safe index (returns None if OOB)

    Missing keys, out of range indexes and type mismatches all resolve to None.

    Examples:
      _embedded.source[0].url
      _embedded.quotes
    """

    _token_head = re.compile(r"([^.? \[\]]+)(.*)$")  # name then rest
    _bracket = re.compile(r"^\[(.*?)\](.*)$")

    @classmethod
    def get(cls, obj: Any, path: Optional[str]) -> Any:
        if path is None:
            return None
        cur = obj
        for seg in path.split("."):
            if cur is None:
                return None
            cur = cls._apply_segment(cur, seg)

        return cur

    @classmethod
    def _apply_segment(cls, base: Any, segment: str) -> Any:
        m = cls._token_head.match(segment)
        if not m:
            raise PathSyntaxError(f"Malformed path segment '{segment}'")
        key, rest = m.group(1), m.group(2)

        if not isinstance(base, dict):
            return None
        cur = base.get(key)

        while rest:
            if rest.startswith("?["):
                rest = rest[1:]
            bm = cls._bracket.match(rest)
            if not bm:
                raise PathSyntaxError(f"Malformed path at '{rest}'")
            selector, rest = bm.group(1), bm.group(2)
            cur = cls._apply_index(cur, selector)

        return cur

    @staticmethod
    def _apply_index(cur: Any, selector: str) -> Any:
        if not selector.isdigit():
            raise PathSyntaxError(f"Unsupported selector '[{selector}]'")
        if not isinstance(cur, list):
            return None

        idx = int(selector)
        if idx < len(cur):
            return cur[idx]
        return None
