"""
Capa de Infraestructura - Conector OCTO.

Implementaciones concretas de los puertos.

Estructura:
- gateways/: Cliente HTTP y gateway OCTO
- in_memory/: Proveedor OCTO simulado para testing y modo local
- security/: Availability keys (JWT)
- translation/: Translator y schemas OCTO -> host por defecto
- observability/: Event sinks
"""
