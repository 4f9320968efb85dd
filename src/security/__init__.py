"""Security module for the Movies API.

The module includes:
- JWTManagerInterface / JWTManager: signed access and refresh tokens
- password hashing and verification with bcrypt
- SessionManager: signup, login, refresh and logout over session cookies
"""
