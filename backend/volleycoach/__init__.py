"""
Volleyball training planner backend.
"""
