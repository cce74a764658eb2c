"""Shared layers: models, interfaces, errors, logging, validation and HTTP transport."""
