"""In-process backend with Redis ``KEYS`` glob semantics.

Useful for tests and for embedding the store without a server. Supports
``*``, ``?``, ``[abc]``, ``[^abc]``, ``[a-z]`` and backslash escapes, which is
the subset Redis documents for pattern matching.
"""
from __future__ import annotations

import re
import threading
from functools import lru_cache


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> "re.Pattern[str]":
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\" and i + 1 < n:
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if ch == "*":
            out.append(".*")
        elif ch == "?":
            out.append(".")
        elif ch == "[":
            j = i + 1
            negate = j < n and pattern[j] == "^"
            if negate:
                j += 1
            members: list[str] = []
            while j < n and pattern[j] != "]":
                if pattern[j] == "\\" and j + 1 < n:
                    members.append(re.escape(pattern[j + 1]))
                    j += 2
                elif j + 2 < n and pattern[j + 1] == "-" and pattern[j + 2] != "]":
                    lo, hi = sorted((pattern[j], pattern[j + 2]))
                    members.append(f"{re.escape(lo)}-{re.escape(hi)}")
                    j += 3
                else:
                    members.append(re.escape(pattern[j]))
                    j += 1
            # Redis treats an unterminated class as running to the end of the pattern
            body = "".join(members)
            if not body:
                out.append("[^\\s\\S]" if not negate else "[\\s\\S]")
            else:
                out.append(f"[{'^' if negate else ''}{body}]")
            i = j + 1
            continue
        else:
            out.append(re.escape(ch))
        i += 1
    return re.compile("".join(out), re.DOTALL)


class MemoryBackend:
    name = "memory"

    def __init__(self):
        self._data: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(value)

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._data.get(key)

    def keys(self, pattern: str) -> list[str]:
        rx = glob_to_regex(pattern)
        with self._lock:
            return [k for k in self._data if rx.fullmatch(k)]

    def delete(self, key: str) -> int:
        with self._lock:
            return 1 if self._data.pop(key, None) is not None else 0

    def ping(self) -> bool:
        return True

    def flush(self) -> None:
        with self._lock:
            self._data.clear()

    def close(self) -> None:
        pass

    def __len__(self) -> int:
        return len(self._data)


__all__ = ["MemoryBackend", "glob_to_regex"]
