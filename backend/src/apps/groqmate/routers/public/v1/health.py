from . import HealthRouter


@HealthRouter.get("")
async def health_endpoint():
    return {"status": "ok"}
