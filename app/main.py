from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.logging_config import ensure_logging
from app.routes.buckets import router as buckets_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_logging()
    yield


app = FastAPI(lifespan=lifespan)

app.include_router(buckets_router)


@app.get("/")
async def root():
    return {"message": "Hello World! Bucket provisioner is running."}
