"""
Shared utilities: configuration, logging and domain validation
"""
