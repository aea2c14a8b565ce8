"""Utility modules for rrdecoder."""
