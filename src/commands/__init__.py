"""
Commands Package.

This package contains all command classes implementing the Command pattern.
Commands that change persons or meetings are marked undoable so the
coordinator can record a new state after they succeed.
"""
