# hook_studio/adapters/api/dependencies.py
from __future__ import annotations

import uuid

import structlog
from fastapi import Request

from hook_studio.core.ports.llm_port import ILanguageModel
from hook_studio.core.use_cases.generate_content import GenerateContent
from hook_studio.shared.container import container

REQUEST_ID_HEADER = "X-Request-Id"


def get_llm_adapter() -> ILanguageModel:
    """Returns the process-wide LLM adapter (overridable in tests via the container)."""
    return container.llm()


def get_generate_content_use_case() -> GenerateContent:
    """Dependency to construct the GenerateContent interactor."""
    return container.generate_content_use_case()


async def bind_request_context(request: Request, call_next):
    """
    HTTP middleware: binds a request id into the structlog context and
    echoes it back on the response.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, path=request.url.path)

    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
