"""
Capa de Aplicación - Conector OCTO.

Casos de uso, DTOs e interfaces (puertos) hacia el proveedor y el host.

Estructura:
- use_cases/: Un caso de uso por operación del host
- dtos/: Data Transfer Objects
- interfaces/: Puertos (gateway OCTO, translator, event sink)
"""
