from liveness.core.config import ServiceProfile

PIPELINE = ServiceProfile(
    name="market-pipeline",
    label="Pipeline service",
    default_port=8080,
    health_body="Pipeline service healthy",
)

STRATEGY = ServiceProfile(
    name="strategy-engine",
    label="Strategy service",
    default_port=8081,
    health_body="Strategy service healthy",
)
