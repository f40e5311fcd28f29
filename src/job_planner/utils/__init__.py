"""Utility modules for job planner."""
