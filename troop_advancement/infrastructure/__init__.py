"""Infrastructure layer: persistence adapters and observability."""
