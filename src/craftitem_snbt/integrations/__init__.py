"""Integrations subpackage for craftitem-snbt.

Contains the pytest plugin (auto-discovered via the pytest11 entry point).
"""
