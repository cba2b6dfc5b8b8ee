"""
HTTP layer for the relay runtime: app factory, routes, CORS and error
handlers.
"""
