"""
User-facing entry points for Loglet.
"""
