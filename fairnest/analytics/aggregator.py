from __future__ import annotations

from collections import Counter
from typing import Any


def _mean(values: list[float]) -> float:
    return round(sum(values) / len(values), 2) if values else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]

    # Workplaces, counting A and B alike
    workplace_counter: Counter[str] = Counter()
    pair_counter: Counter[tuple[str, str]] = Counter()
    for s in searches:
        a, b = s.get("workplace_a"), s.get("workplace_b")
        for w in (a, b):
            if w:
                workplace_counter[w] += 1
        if a and b:
            pair_counter[tuple(sorted((a, b)))] += 1
    top_workplaces = [{"id": n, "count": c} for n, c in workplace_counter.most_common(10)]
    top_pairs = [{"pair": list(p), "count": c} for p, c in pair_counter.most_common(5)]

    empty = sum(1 for s in searches if s.get("results_returned", 0) == 0)
    truncated = sum(
        1 for s in searches if s.get("total_candidates", 0) > s.get("results_returned", 0)
    )

    cache_hits = sum(1 for s in searches if s.get("cache_hit"))
    cache_misses = total - cache_hits

    return {
        "total_searches": total,
        "avg_response_time_ms": round(sum(times) / len(times), 1) if times else 0.0,
        "top_workplaces": top_workplaces,
        "top_pairs": top_pairs,
        "avg_ratio": _mean([s["ratio"] for s in searches if "ratio" in s]),
        "avg_lambda": _mean([s["lambda"] for s in searches if "lambda" in s]),
        "avg_budget": _mean([s["budget"] for s in searches if "budget" in s]),
        "empty_result_rate": round(empty / total * 100, 1) if total else 0.0,
        "truncated_result_rate": round(truncated / total * 100, 1) if total else 0.0,
        "cache_stats": {
            "hits": cache_hits,
            "misses": cache_misses,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
    }
