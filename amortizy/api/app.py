"""FastAPI application entry point."""

from fastapi import FastAPI

from amortizy.api.routes import schedule
from amortizy.config import settings

app = FastAPI(
    title="Amortizy",
    description="Loan amortization schedule generator",
    version="0.1.0",
    debug=settings.debug,
)

app.include_router(schedule.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
