# backend/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import init_db
from utils.errors import AppError

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Router imports
from routes.auth import router as auth_router
from routes.feedback import router as feedback_router
from routes.admin_feedback import router as admin_feedback_router
from routes.categories import router as categories_router

# Initialisation
init_db()

app = FastAPI(title="Feedback App API", version="1.0.0")

# CORS Configuration
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Domain errors become client errors with a short message only
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


# Router registration
app.include_router(auth_router)
app.include_router(feedback_router)
app.include_router(admin_feedback_router)
app.include_router(categories_router)

@app.get("/")
def read_root():
    return {"message": "Feedback App API is running"}
