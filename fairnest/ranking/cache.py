from __future__ import annotations

import hashlib
import json
import time
from typing import Any

from .config import DEFAULT_RANKING_CONFIG, RankingConfig

# Entries are keyed by graph token and request. A frozen graph never changes,
# so an entry stays valid for its whole TTL.
_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0


def _make_key(graph_token: str, request_dict: dict) -> str:
    normalized = json.dumps({"graph": graph_token, "request": request_dict}, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(
    graph_token: str,
    request_dict: dict,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> Any | None:
    """Return the cached response for ``request_dict`` on the graph ``graph_token``, if fresh."""
    global _hits, _misses
    key = _make_key(graph_token, request_dict)
    entry = _cache.get(key)
    if entry and time.time() - entry["created_at"] < config.cache_ttl_seconds:
        _hits += 1
        return entry["value"]
    if entry:
        del _cache[key]
    _misses += 1
    return None


def cache_set(
    graph_token: str,
    request_dict: dict,
    value: Any,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> None:
    key = _make_key(graph_token, request_dict)
    _cache.pop(key, None)
    while _cache and len(_cache) >= config.cache_max_entries:
        # dicts keep insertion order: the first key is the oldest entry
        del _cache[next(iter(_cache))]
    _cache[key] = {"value": value, "created_at": time.time()}


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
