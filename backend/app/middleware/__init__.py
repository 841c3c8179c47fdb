# Middleware package init
"""
LexSite Backend: Middleware Package
=====================================

Execution order for a request:
    [Rate Limit] → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

Responses pass back through the same chain in reverse, so the request ID
header is set and the access log sees the final status code.
"""
