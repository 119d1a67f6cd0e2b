import logging
from fastapi import FastAPI
from app.api.licenses import router as licenses_router
from app.core.config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(
    title="License Checker",
    version="1.0.0",
)

# API principali
app.include_router(licenses_router, prefix="/api", tags=["Licenses"])

# per test rapido
@app.get("/")
def root():
    return {"message": "License Checker Backend is running"}
