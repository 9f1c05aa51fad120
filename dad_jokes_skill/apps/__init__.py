"""Application entry surfaces."""
