"""Capline — caption timing, segmentation and validation."""

__version__ = "0.1.0"
