"""OpenTelemetry tracer provider setup."""

from __future__ import annotations

from loguru import logger
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SimpleSpanProcessor

from .settings import Settings

_initialized = False


def setup_otel(settings: Settings) -> bool:
    """Install a global tracer provider. Safe to call more than once.

    Returns ``True`` when a provider was installed by this call. When
    tracing is disabled the OpenTelemetry API stays a no-op.
    """

    global _initialized
    if _initialized or not settings.otel_enabled:
        return False

    provider = TracerProvider(resource=Resource.create({"service.name": settings.otel_service_name}))
    if settings.otel_exporter == "console":
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    elif settings.otel_exporter == "otlp":
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{settings.otel_endpoint.rstrip('/')}/v1/traces"))
        )
    # "none": spans are created but not exported

    trace.set_tracer_provider(provider)
    _initialized = True
    logger.debug("Tracing enabled for {} ({})", settings.otel_service_name, settings.otel_exporter)
    return True
