"""Report validation.

Cross-field consistency checks over an assembled SectorReport, reported as
blocking errors and informational warnings. Never raises on bad data.

Deterministic -- pure functions of the report.
"""
