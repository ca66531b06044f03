"""
Fetch lifecycle state module.

Tracks a quote screen through IDLE -> FETCHING -> LOADED / FAILED and drops
results from fetches that a newer submit has superseded.
"""
