"""Chapter segmentation core."""
