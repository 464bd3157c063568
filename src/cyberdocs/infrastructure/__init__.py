"""Infrastructure layer: filesystem access and catalog assembly.

This layer depends on stdlib, the domain layer, and third-party I/O
libraries (anyio). It must never import from services, commands, or output.
"""
