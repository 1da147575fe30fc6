"""
Task Flow Analyzer

Learns per-category patterns from a task board and ranks what to do next.
"""

__version__ = "0.1.0"
