# Middleware package init
"""
Sample API: Middleware Package
================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: assigns or echoes X-Request-ID and stores it in a ContextVar
    2. Logging: one access-log line per request, tagged with the request ID
    3. CORS: FastAPI's CORSMiddleware
"""
