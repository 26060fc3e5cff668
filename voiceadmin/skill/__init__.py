"""Voice skill request handling: dispatch, handlers and responses."""
