from fastapi import FastAPI
from strikeprint.routes.health_route import router as health_router
from strikeprint.routes.fingerprint_route import router as fingerprint_router

app = FastAPI(
    title="StrikePrint",
    version="3.1.0"
)

app.include_router(health_router, tags=["health"])
app.include_router(fingerprint_router, tags=["fingerprint"])
