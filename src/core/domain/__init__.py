"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce httpx, CLI, ni SDKs: solo valores (request/response,
  sesión) y errores.
"""
