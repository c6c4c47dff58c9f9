"""
Infrastructure helpers for Loglet: internal diagnostics logger and error types.
"""
