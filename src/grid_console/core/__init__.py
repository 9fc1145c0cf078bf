"""Core types for grid-console: exceptions, value objects and protocols."""
