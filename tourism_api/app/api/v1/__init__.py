"""
Version 1 of the API.

This subpackage bundles all endpoints for the first public version of
the Tourism API.  Breaking changes should be introduced in new version
subpackages to preserve backwards compatibility with the web client.
"""
