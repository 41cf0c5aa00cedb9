"""
Utility functions module.

Time Semantics:
- Price point timestamps are epoch milliseconds as supplied by the market-data feed
- Conversions to datetime are always UTC
- Sampling cadence is inferred from timestamps, never from wall-clock time
"""
