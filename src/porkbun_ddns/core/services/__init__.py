"""Core services: orchestration that stays free of CLI and HTTP details."""
