"""Core building blocks: capability cache, state labels, event text, helpers.

Subpackages are imported lazily by callers; this module only documents the
layout:

- ``capabilities``: host capability cache and well-known names
- ``labels``: compute-once toggle state labels
- ``text``: event text aggregation
- ``utils``: package version and foreground activity helpers
- ``dto`` / ``interfaces`` / ``errors`` / ``logging``: shared contracts
"""
