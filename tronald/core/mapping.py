from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional
import logging

from .path import PathResolver
from .utils import DATE_FORMAT, parse_date, to_str


# Rule shapes, keyed by their head key:
#   {"path": "a.b[0].c"}                       value at path
#   {"date": {"path": "...", "fmt": "..."}}    datetime parsed from the string at path
#   {"list": {"path": "...", "cast": "str"}}   list at path, each element cast, Nones dropped
# Tail keys applied afterwards: "default", "cast".
RuleHandler = Callable[[Dict[str, Any], Dict[str, Any]], Any]


class RecordMapper:
    """
    Evaluates a set of declarative field rules against one decoded JSON object.

    A rule that fails never aborts the record: its field resolves to None (or the
    rule's "default") and the error is logged at DEBUG.
    """

    def __init__(self, rules: Dict[str, Dict[str, Any]], *, logger: Optional[logging.Logger] = None) -> None:
        self._validate_rules(rules)
        self.rules = rules
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: Dict[str, RuleHandler] = {
            "path": self._op_path,
            "date": self._op_date,
            "list": self._op_list,
        }

    def map(self, record: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(record, dict):
            raise TypeError("record must be a JSON object (dict).")

        out: Dict[str, Any] = {}
        for name, rule in self.rules.items():
            out[name] = self._eval_rule(rule, record, field=name)
        return out

    @staticmethod
    def _validate_rules(rules: Dict[str, Any]) -> None:
        if not isinstance(rules, dict) or not rules:
            raise ValueError("rules must be a non-empty object (dict).")

        for name, rule in rules.items():
            if not isinstance(rule, dict):
                raise ValueError(f"rule for field '{name}' must be an object.")

            heads = [k for k in ("path", "date", "list") if k in rule]
            if len(heads) != 1:
                raise ValueError(f"rule for field '{name}' needs exactly one of path/date/list, got {heads}.")

            list_spec = rule.get("list")
            casts = [rule.get("cast"), list_spec.get("cast") if isinstance(list_spec, dict) else None]
            if any(c not in (None, "str") for c in casts):
                raise ValueError(f"rule for field '{name}' uses an unsupported cast; only 'str' is known.")

    def _eval_rule(self, rule: Dict[str, Any], record: Dict[str, Any], *, field: str) -> Any:
        head_key = next(k for k in self._handlers if k in rule)
        try:
            val = self._handlers[head_key](rule, record)
        except Exception as exc:
            self._logger.debug("Rule error for field '%s': %r | rule=%s", field, exc, rule)
            val = None

        return self._apply_tail_ops(val, rule)

    @staticmethod
    def _op_path(rule: Dict[str, Any], record: Dict[str, Any]) -> Any:
        return PathResolver.get(record, rule["path"])

    @staticmethod
    def _op_date(rule: Dict[str, Any], record: Dict[str, Any]) -> Any:
        spec = rule["date"]
        src = PathResolver.get(record, spec["path"])
        return parse_date(src, spec.get("fmt", DATE_FORMAT))

    @classmethod
    def _op_list(cls, rule: Dict[str, Any], record: Dict[str, Any]) -> Any:
        spec = rule["list"]
        items = PathResolver.get(record, spec["path"])
        if not isinstance(items, list):
            return None

        out: List[Any] = []
        for item in items:
            if "cast" in spec:
                item = cls._cast(item, spec["cast"])
            if item is not None:
                out.append(item)
        return out

    @classmethod
    def _apply_tail_ops(cls, val: Any, rule: Dict[str, Any]) -> Any:
        if "cast" in rule and val is not None:
            val = cls._cast(val, rule["cast"])

        if val is None and "default" in rule:
            default = rule["default"]
            # mapped records never share one default list
            val = list(default) if isinstance(default, list) else default

        return val

    @staticmethod
    def _cast(val: Any, t: str) -> Any:
        if t == "str":
            return to_str(val)

        raise ValueError(f"Unsupported cast '{t}'.")
