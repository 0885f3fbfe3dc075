"""Core application infrastructure: config, errors, lifespan, middleware."""
