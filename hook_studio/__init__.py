# hook_studio/__init__.py
"""
Hook Studio - localized video hook and script generation API.

This package follows Hexagonal Architecture (Ports & Adapters): the
`core` package holds the domain and use cases, `adapters` holds the
FastAPI surface and the OpenAI client, `shared` holds configuration,
logging, tracing and dependency wiring.
"""

__version__ = "1.0.0"
