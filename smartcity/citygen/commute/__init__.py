"""Home/work assignment for agents that consume a generated city."""
