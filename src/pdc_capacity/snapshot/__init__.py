"""
Configuration snapshot package.

Import/export of the whole configuration as one JSON document, the
session-scoped holder that swaps snapshots atomically, and the pure edit
helpers the editors use to produce the next snapshot.
"""
