"""Application layer: ports (gateway contracts) and workflow services."""
