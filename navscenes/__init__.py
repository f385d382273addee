"""
Navigation Scene Reconciler

Turns successive navigation trees into a stable, ordered list of scenes
that a rendering layer can mount, keep or retire.
"""

__version__ = "0.1.0"
