"""Instrumentation API: value types, options, ports and typed instruments."""
