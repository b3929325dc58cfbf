"""
Logging, tracing and metrics bootstrap for the pizza shop apps.

Order and customer events (order_placed, customer_created, order_store_error)
are emitted as one JSON object per line, stamped with the active request
span so a submitted form can be followed from the access span to the rows
it wrote. The business counters in ``metrics`` share the default Prometheus
registry with the HTTP metrics, so one /metrics scrape covers both.
"""
import os
import logging
import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

# OpenTelemetry
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor


def add_otel_ids(logger, log_method, event_dict):
    """Attach the current request's trace and span ids to an order event."""
    span = trace.get_current_span()
    if span.is_recording():
        ctx = span.get_span_context()
        event_dict["trace_id"] = trace.format_trace_id(ctx.trace_id)
        event_dict["span_id"] = trace.format_span_id(ctx.span_id)
    return event_dict


def configure_logging():
    # LOG_LEVEL=DEBUG also surfaces customer_updated noise on repeat orders
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_otel_ids,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_tracing(app: FastAPI, service_name: str):
    resource = Resource.create({SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    # OTLP_ENDPOINT="" keeps spans in-process (tests, local runs without a collector)
    otlp_endpoint = os.getenv("OTLP_ENDPOINT", "http://localhost:4317")
    if otlp_endpoint:
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    # One span per form view, submission, listing and status lookup
    FastAPIInstrumentor.instrument_app(app)


def configure_metrics(app: FastAPI):
    # Per-route latency and status codes next to the pizza_* counters at /metrics
    Instrumentator().instrument(app).expose(app)


def setup_observability(app: FastAPI, service_name: str):
    """
    Wire structured logs, traces and /metrics into a pizza shop app.
    Call once per FastAPI instance, before its routers are included.
    """
    configure_logging()
    configure_tracing(app, service_name)
    configure_metrics(app)
