"""Core services: one module per step of a run, plus the orchestrator."""
