"""Hashing, versioning and batch processing for asset fingerprinting."""
