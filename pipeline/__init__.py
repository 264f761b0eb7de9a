"""
Fixture extraction pipeline.

Recovers upcoming match records from the rendered Flashscore team fixture page
using a cascade of decreasing-confidence strategies.
"""

__version__ = "1.0.0"
