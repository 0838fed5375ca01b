# Middleware package init
"""
ForumGuard Backend — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line and any service log lines
    written while handling the request carry the same correlation ID.
"""
