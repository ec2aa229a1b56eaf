# hook_studio/core/domain/__init__.py
"""
Domain Entities and Value Objects.

This package defines the core data structures and pure functions of the
service: locales, the message catalog, prompt assembly and normalization of
model output.
"""
