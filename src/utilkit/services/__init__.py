"""Service layer: debounced execution and JSON document operations for the CLI."""
