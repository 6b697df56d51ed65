"""HTTP surface for the accident risk dashboard."""
