"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (earth radius, unit factors, defaults)
- exceptions: Custom exception hierarchy
- ingress: Payload deserialisation at the engine boundary
"""
