# proofing/engine/__init__.py

"""Engine package with the pure text transformations.

Correction, highlighting and statistics never perform I/O and never hold
state between calls.
"""
