# hook_studio/adapters/__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in `hook_studio.core.ports`.
These adapters connect the application to the outside world:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `llm_adapter`: Secondary Adapter (Driven) - OpenAI chat completions.

In Hexagonal Architecture, dependencies point INWARD. These modules depend on `hook_studio.core`,
but `hook_studio.core` never imports from here.
"""
