# hook_studio/core/ports/__init__.py
"""
Core Ports (Interfaces).

Abstract base classes that the Infrastructure Adapters must implement, so the
Core Domain can call a language model without knowing which provider serves it.
"""

from .llm_port import ILanguageModel

__all__ = [
    "ILanguageModel",
]
