"""
Fairness-aware station ranking.

Responsibilities:
- Derive per-commuter weights from the ratio dial.
- Score every station reachable from both workplaces.
- Rank, cut to a shortlist and attach explanation categories.
- Serve the ranking as a cached, logged query for the API.
"""
