"""Configuration module for the Movies API.

This module contains the configuration settings, the logging setup and the
dependency injection functions for the application. It provides:

- Application settings management with environment variable support
- Dependency injection functions for FastAPI
- JWT token and session management configuration
- MongoDB connection configuration
- loguru based logging

The module uses Pydantic settings for type-safe configuration management
and automatic environment variable loading.
"""
