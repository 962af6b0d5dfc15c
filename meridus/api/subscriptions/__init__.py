"""Administrative subscription API resource."""
