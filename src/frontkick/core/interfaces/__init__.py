"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El Core depende de abstracciones: prompts, procesos, almacén de credenciales
  y proveedor de hosting se inyectan.
"""
