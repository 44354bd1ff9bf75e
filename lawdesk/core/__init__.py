"""Core wiring: settings, exception handlers, lifespan, rate limiting, firm context."""
