"""Modelos y resultados del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2 y dataclasses).
- El dominio no conoce HTTP, subprocesos ni la terminal: solo conceptos del problema.
"""
