"""
Registry invariants

Properties every registry built from the built-in assertions must keep,
whatever else is added to it.
"""
