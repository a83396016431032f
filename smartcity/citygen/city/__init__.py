"""City generation orchestrator."""
