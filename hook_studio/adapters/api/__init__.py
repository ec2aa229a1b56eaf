# hook_studio/adapters/api/__init__.py
"""
REST API Adapter.

This package acts as the HTTP entry point for Hook Studio.
It is built on FastAPI and follows the Hexagonal Architecture principles:
- It depends on `hook_studio.core` (Use Cases & Models).
- It resolves dependencies from `hook_studio.shared.container`.
- It does NOT contain business logic.
"""
