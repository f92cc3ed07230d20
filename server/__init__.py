"""HTTP service for the agent workflow planner."""
