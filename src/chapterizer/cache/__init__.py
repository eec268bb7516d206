"""Segmentation result cache."""
