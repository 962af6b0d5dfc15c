"""Combined bot and website status resource."""
