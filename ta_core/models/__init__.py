"""
Result models module.

Immutable data structures for indicator outputs, their categorical
classification and the aggregated analysis result.
"""
