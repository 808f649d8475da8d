"""Core domain types: models, errors and the generation context."""
