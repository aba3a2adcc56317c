"""Account registry."""
