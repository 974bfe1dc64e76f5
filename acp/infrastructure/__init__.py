"""Infrastructure: implementations of application ports (DB, cache, audit, security)."""
