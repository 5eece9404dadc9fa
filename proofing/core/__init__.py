# proofing/core/__init__.py

"""Core domain models and exceptions shared across the proofing system.

This package holds the immutable value objects passed between the engine
and the service layer, plus the exception hierarchy.
"""
