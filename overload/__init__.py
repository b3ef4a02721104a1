"""Overload - progressive-overload strength training with multi-device sync.

The history of completed sessions is the source of truth. Exercise state and
week progress are always recomputed from it, which is what makes merging
snapshots from several devices safe.
"""

__version__ = "0.4.0"
