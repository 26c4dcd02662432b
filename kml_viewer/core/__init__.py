"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (namespaces, Earth radius, upload rules)
- exceptions: Custom exception hierarchy
- ingress: Upload validation and decoding
"""
