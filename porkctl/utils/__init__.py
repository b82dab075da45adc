"""
Shared utilities: configuration, logging, validation and output formatting
"""
