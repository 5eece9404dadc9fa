# proofing/service/__init__.py

"""Service layer: configuration, text acquisition, checker access and the pipeline."""
