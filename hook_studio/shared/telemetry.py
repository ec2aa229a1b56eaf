# hook_studio/shared/telemetry.py
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
import structlog

from hook_studio import __version__
from hook_studio.shared.config import settings

logger = structlog.get_logger()


def build_resource(app_name: str) -> Resource:
    """
    Resource attributes attached to every exported span.
    The model identifiers let traces be split by the model that served them.
    """
    return Resource.create(attributes={
        "service.name": app_name,
        "service.namespace": settings.APP_NAME,
        "service.version": __version__,
        "deployment.environment": settings.APP_ENV.value,
        "hook_studio.hook_model": settings.HOOK_MODEL,
        "hook_studio.script_model": settings.SCRIPT_MODEL,
        "hook_studio.default_language": settings.DEFAULT_LANGUAGE,
    })


def setup_telemetry(app_name: str = settings.OTEL_SERVICE_NAME) -> bool:
    """
    Installs a tracer provider exporting to the configured OTLP collector.
    Called once from the application lifespan.

    Returns False (and leaves the no-op provider in place) when no
    OTEL_EXPORTER_OTLP_ENDPOINT is configured.
    """
    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT configured")
        return False

    logger.info("telemetry_init", service=app_name, endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)

    trace_provider = TracerProvider(resource=build_resource(app_name))

    otlp_exporter = OTLPSpanExporter(endpoint=f"{settings.OTEL_EXPORTER_OTLP_ENDPOINT.rstrip('/')}/v1/traces")
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    if settings.DEBUG:
        trace_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(trace_provider)
    return True


def instrument_fastapi(app) -> None:
    """Traces incoming HTTP requests, except the health probes."""
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app, excluded_urls="health/live,health/ready")


def get_tracer(name: str):
    """Tracer for manual spans, e.g. `use_case.generate_content`."""
    return trace.get_tracer(name)
