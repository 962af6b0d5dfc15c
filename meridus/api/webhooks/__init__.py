"""GitHub webhook receiver resource."""
