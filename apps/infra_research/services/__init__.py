"""Public entry points for infra model research operations."""
