"""Core: configuration, constants, messages, app wiring (lifespan, handlers, limiter)."""
