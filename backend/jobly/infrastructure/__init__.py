"""Infrastructure Layer — database, logging, tokens and schema validation adapters."""
