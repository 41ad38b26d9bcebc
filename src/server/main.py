"""FastAPI application for json2sections."""

from fastapi import FastAPI

from server.routers.decode import router as decode_router

app = FastAPI(title="json2sections", description="Decode semi-structured JSON payloads into sections.")
app.include_router(decode_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
