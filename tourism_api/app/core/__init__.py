"""Core infrastructure: settings, logging, security helpers and the collection primitive."""
