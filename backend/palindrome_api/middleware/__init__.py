# Middleware package init
"""
Palindrome API — Middleware Package
====================================

    - request_context.py: correlation ID (ContextVar + log filter + response
      header) and one access log line per request
"""
