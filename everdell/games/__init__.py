"""
Games module - Card sets and opening layouts.

Each subpackage has:
- Card definitions
- Setup producing an initial GameState
"""
