"""FastAPI application entry for the csvdoc render API."""

from fastapi import FastAPI

from csvdoc import __version__
from csvdoc.utils.logging_config import configure_logging
from server.routers.render import router

configure_logging()

app = FastAPI(
    title="csvdoc",
    description="Convert CSVDoc/TSVDoc documents to HTML",
    version=__version__,
)
app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
