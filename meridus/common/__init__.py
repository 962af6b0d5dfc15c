"""Small helpers shared across Meridus packages."""
