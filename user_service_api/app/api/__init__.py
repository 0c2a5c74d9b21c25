"""
API package: routers, request dependencies, error handlers and
middleware that sit between HTTP and the service layer.
"""
