"""Custom exceptions module for the Movies API.

Two families live here:

- Security exceptions (``exceptions.security``) raised by the token manager
  and the session manager. They know nothing about HTTP.
- API exceptions (``exceptions.api``) raised by routers. They carry an HTTP
  status code and render their own JSON body through the handler registered
  in ``exceptions.handlers``.
"""
