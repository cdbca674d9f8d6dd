"""Core metadata resolution and artifact emission."""

__all__ = [
    "fields",
    "gitmeta",
    "options",
    "orchestrator",
    "probe",
    "reporter",
    "runner",
]
