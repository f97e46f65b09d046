"""
Shared building blocks: configuration base, logging, request context.
"""
