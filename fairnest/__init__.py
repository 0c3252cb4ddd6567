"""
FairNest: station recommendations for two commuters.

Given the stations where two people work, rank the stations they could live
near by weighted commute time, fairness between the two commutes and rent.
"""

__version__ = "1.0.0"
