# main.py

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from finance_visualizer.core.config import settings
from finance_visualizer.core.exceptions import NotFound, StorageUnavailable, ValidationError
from finance_visualizer.core.logging import get_logger, setup_logging
from finance_visualizer.db.mongodb import close_mongo_connection, connect_to_mongo, get_database
from finance_visualizer.db.transaction_store import TransactionStore

from finance_visualizer.api.v1.routes.transaction_route import router as transaction_router
from finance_visualizer.api.v1.routes.category_route import router as category_router

logger = get_logger(__name__)


# -----------------------------
# FASTAPI APP
# -----------------------------
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Backend API for recording transactions and dashboard summaries"
)

# -----------------------------
# CORS MIDDLEWARE
# -----------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------
# ROUTERS
# -----------------------------
app.include_router(transaction_router, prefix="/api/v1")
app.include_router(category_router, prefix="/api/v1")


# -----------------------------
# ERROR HANDLERS
# -----------------------------
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid transaction", "fields": exc.errors},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    fields = {}
    for err in exc.errors():
        loc = [str(part) for part in err["loc"] if part != "body"]
        fields[".".join(loc) or "payload"] = err["msg"]
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "fields": fields},
    )


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Transaction not found"},
    )


@app.exception_handler(StorageUnavailable)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "Database unavailable, please try again"},
    )


# -----------------------------
# STARTUP EVENT
# -----------------------------
@app.on_event("startup")
async def startup_event():
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger.info("Starting %s %s", settings.PROJECT_NAME, settings.VERSION)
    try:
        await connect_to_mongo()
        db = await get_database()
        await TransactionStore(db[settings.MONGO_COLLECTION]).ensure_indexes()
        logger.info("Indexes created")
    except StorageUnavailable:
        # requests will answer 503 until the database is reachable
        logger.warning("MongoDB unreachable at startup, indexes not created")


# -----------------------------
# SHUTDOWN EVENT
# -----------------------------
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down API")
    await close_mongo_connection()


# -----------------------------
# ROOT ENDPOINT
# -----------------------------
@app.get("/", tags=["Health"])
def root():
    return {
        "message": "Personal Finance Visualizer Backend Running",
        "version": settings.VERSION,
        "docs": "/docs"
    }
