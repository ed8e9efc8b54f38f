"""
guest_roster: reconciliation and caching of hotel check-in guest rosters.
"""

__version__ = "0.1.0"
