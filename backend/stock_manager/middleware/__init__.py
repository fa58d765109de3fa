"""
Stock Manager Backend — Middleware Package
===========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first, so the access log line can carry it
    2. Logging measures the full handler time and sees the final status
    3. CORS answers preflight requests and decorates every response
"""
