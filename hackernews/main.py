import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
# Import CORSMiddleware
from fastapi.middleware.cors import CORSMiddleware

# OpenTelemetry Imports (Basic Setup)
from opentelemetry import trace
# Import exporters and processor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter  # Sends via HTTP
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

# SlowAPI imports
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from strawberry.fastapi import GraphQLRouter

from hackernews.core.config import settings
from hackernews.database import async_engine, create_tables
from hackernews.graphql.schema import get_context, schema  # The combined schema and its context
from hackernews.logging_config import setup_logging

# Call setup_logging early, before creating app or loggers
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# --- Rate Limiting Setup ---
# key_func identifies the client by IP
# SlowAPIMiddleware applies the default limit to every undecorated route, /graphql included
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.GRAPHQL_RATE_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
)


def setup_opentelemetry(app: FastAPI):
    # Check if tracing is enabled using the dedicated flag from settings
    if not settings.OPENTELEMETRY_ENABLED:
        logger.info("OpenTelemetry tracing is disabled via OPENTELEMETRY_ENABLED setting.")
        return

    logger.info("Setting up OpenTelemetry")
    # Set service name for OTel
    resource = Resource(attributes={SERVICE_NAME: settings.OTEL_SERVICE_NAME})

    # Set trace provider
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    # Configure exporter based on endpoint setting
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
        logger.info(f"Configuring OTLP Exporter to: {endpoint}/v1/traces")
        exporter = OTLPSpanExporter(endpoint=f"{endpoint.strip('/')}/v1/traces")
    else:
        logger.warning("OTEL_EXPORTER_OTLP_ENDPOINT not set. Defaulting to ConsoleSpanExporter.")
        exporter = ConsoleSpanExporter()
    provider.add_span_processor(BatchSpanProcessor(exporter))

    # Instrument FastAPI
    FastAPIInstrumentor.instrument_app(app)
    logger.info("OpenTelemetry setup complete.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Setup happens before yielding
    setup_opentelemetry(app)
    # Development convenience; deployments create the schema out of band
    if settings.DB_CREATE_TABLES:
        await create_tables()

    logger.info("Application startup complete.")
    yield
    # Cleanup happens after yielding
    await async_engine.dispose()
    logger.info("Application shutdown.")


app = FastAPI(title="Hackernews Clone", lifespan=lifespan)

# --- Add Middleware ---
# CORS for browser clients (GraphiQL, frontends)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add SlowAPI state, handler and middleware
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# --- GraphQL Setup ---
# context_getter hands each request its own DB session
graphql_app = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.GRAPHIQL_ENABLED else None,
)
app.include_router(graphql_app, prefix="/graphql")


# --- Basic Routes ---
@app.get("/")
async def read_root():
    logger.info("Root endpoint called")
    return {"message": "Welcome to the Hackernews Clone API"}


@app.get("/health")
@limiter.limit("10/minute")  # Stricter than the default limit
async def health_check(request: Request):  # slowapi needs the request
    logger.debug("Health check endpoint called")
    return {"status": "ok"}


if __name__ == "__main__":
    # uvicorn hackernews.main:app is used outside local testing
    import uvicorn

    logger.info("Starting Uvicorn directly for local testing")
    uvicorn.run(app, host="0.0.0.0", port=8000)
