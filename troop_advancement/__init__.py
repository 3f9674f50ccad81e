"""
Troop Advancement - rank advancement workflow engine

Tracks a member's progress toward successive ranks: the requirement
checklist for each rank, the conference and board of review milestones,
and the promotion of the member once a board of review is complete.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
