"""Layout engine: width distribution, wrapping, sizing, alignment and pagination."""
