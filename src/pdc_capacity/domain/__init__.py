"""
Capacity domain package.

Pure functions and data containers only:
- no file access
- no printing
- no logging
"""
