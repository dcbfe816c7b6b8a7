import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.endpoints import competitors as competitor_endpoints
from app.api.endpoints import rejection_reasons as rejection_reason_endpoints
from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import DuplicateError, EnrollmentServiceError, NotFoundError, ValidationError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database tables ready")
    yield

app = FastAPI(title="Olympiad Competitor Enrollment API", lifespan=lifespan)

# Include routers
app.include_router(competitor_endpoints.router, prefix="/competitors", tags=["Competitors"])
app.include_router(rejection_reason_endpoints.router, prefix="/rejection-reasons", tags=["Rejection Reasons"])

ERROR_STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}

@app.exception_handler(EnrollmentServiceError)
async def enrollment_service_error_handler(request: Request, exc: EnrollmentServiceError):
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
