"""
navscenes CLI - Navigation Scene Reconciliation

Commands:
- navscenes reconcile - Reconcile one tree transition
- navscenes replay - Replay a navigation trace
- navscenes version - Show version information
"""

__version__ = "0.1.0"
