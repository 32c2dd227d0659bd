from .auth import router as auth_router
from .personas import router as personas_router
from .ubicacion import provincias_router, ciudades_router
from .instituciones import router as instituciones_router
from .usuarios import tipos_usuario_router, usuarios_router
from .estudiantes import estudiantes_router, universitarios_router
from .autoridades_uteq import router as autoridades_uteq_router
from .actividades import tematicas_router, actividades_router
from .programas_visita import programas_router, visita_detalles_router, detalle_autoridad_router
from .dudas import router as dudas_router
from .codigos import router as codigos_router

# routers que exigen un Bearer token
protected_routers = [
    personas_router,
    provincias_router,
    ciudades_router,
    instituciones_router,
    tipos_usuario_router,
    usuarios_router,
    estudiantes_router,
    universitarios_router,
    autoridades_uteq_router,
    tematicas_router,
    actividades_router,
    programas_router,
    visita_detalles_router,
    dudas_router,
    detalle_autoridad_router,
    codigos_router,
]

__all__ = [
    "auth_router",
    "protected_routers",
]
