"""Service layer: catalog operations returning ServiceResult.

Services may import from domain, infrastructure, and the mcp producers.
They must never import from commands or output.
"""
