"""
Attribute-style dictionary used for configuration data.
"""

import builtins
from collections.abc import ItemsView, KeysView
from typing import Any


class DotDict:
    """
    Mapping with attribute access and dotted-path lookup.

    Nested dicts become DotDicts, so both config.output.width and
    config.get("output.width") work.
    """

    # Keys that would shadow methods
    _RESERVED_KEYS = frozenset({"set", "get", "has", "dict", "keys", "items"})

    def __init__(self, **kwargs: Any) -> None:
        self.set(**kwargs)

    def set(self, **kwargs: Any) -> "DotDict":
        """Set several keys at once, converting nested dicts."""
        for key, val in kwargs.items():
            self._set_item(key, val)
        return self

    def _set_item(self, key: Any, val: Any) -> None:
        key = str(key)
        if key.startswith("_") or key in self._RESERVED_KEYS:
            raise ValueError(f"Key '{key}' is reserved and cannot be used")
        if isinstance(val, dict):
            val = DotDict(**val)
        elif isinstance(val, list):
            val = [DotDict(**v) if isinstance(v, dict) else v for v in val]
        setattr(self, key, val)

    def _data(self) -> builtins.dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    def dict(self) -> builtins.dict[str, Any]:
        """Convert back to plain nested dicts."""
        result: builtins.dict[str, Any] = {}
        for key, val in self._data().items():
            if isinstance(val, DotDict):
                val = val.dict()
            elif isinstance(val, list):
                val = [v.dict() if isinstance(v, DotDict) else v for v in val]
            result[key] = val
        return result

    def keys(self) -> KeysView[str]:
        return self._data().keys()

    def items(self) -> ItemsView[str, Any]:
        return self._data().items()

    def __contains__(self, key: Any) -> bool:
        return key in self._data()

    def __getitem__(self, key: str) -> Any:
        if key not in self:
            raise KeyError(key)
        return getattr(self, key)

    def __setitem__(self, key: str, val: Any) -> None:
        self._set_item(key, val)

    def __len__(self) -> int:
        return len(self._data())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.dict()!r})"

    def _walk(self, path: str) -> tuple[bool, Any]:
        cur: Any = self
        for part in (p for p in path.split(".") if p):
            if not isinstance(cur, DotDict) or part not in cur:
                return False, None
            cur = getattr(cur, part)
        return True, cur

    def has(self, path: str) -> bool:
        """Check whether a dotted path (e.g. "output.width") exists."""
        return bool(path) and self._walk(path)[0]

    def get(self, path: str, default: Any = None) -> Any:
        """
        Value at a dotted path, or default when any component is missing.

        Example:
            width = config.get("output.width", 80)
        """
        if not path:
            return default
        found, value = self._walk(path)
        return value if found else default
