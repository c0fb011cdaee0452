"""Terminal resource selector for the cumulus cloud CLI.

The engine is generic; :mod:`cumulus_ui.resources` supplies schemas for the
record types the CLI lists.
"""
