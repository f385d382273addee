"""
Test suite for the scene reconciler.

Focus areas:
- Key derivation and ordering
- Reconciliation invariants (identity reuse, staleness, single active scene)
- Trace loading and replay determinism
- CLI and logging configuration
"""
