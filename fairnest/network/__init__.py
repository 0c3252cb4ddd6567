"""
Transit network layer.

Responsibilities:
- Hold the station/edge graph and answer adjacency lookups.
- Compute single-source commute times over the graph.
- Load the demonstration network from CSV and share it process-wide.
"""
