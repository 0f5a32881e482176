import os
import logging

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import uvicorn

import config
from succession_engine import IncompleteInputError
from api.agents.advisor_agent import AdvisorError, InvalidTranscriptError
from api.routers.analysis import router as analysis_router
from api.routers.chatbot import router as chatbot_router
from api.models.responses import HealthResponse

config.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=config.SERVICE_NAME,
    description="Business succession planning: scenario classification and advisory content",
    version=config.API_VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(analysis_router)
app.include_router(chatbot_router)

# Mount static files
static_dir = os.path.join(os.path.dirname(__file__), "static")
if os.path.exists(static_dir):
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "message": config.SERVICE_NAME,
        "version": config.API_VERSION,
        "endpoints": {
            "analyse": "/api/analyse - POST - Analyse a completed questionnaire",
            "report": "/api/analyse/report - POST - Analysis with formatted text report",
            "statistics": "/api/statistiken - GET - Facts and figures on business succession",
            "wizard": "/api/chatbot/next, /api/chatbot/finalize - POST - Question-by-question wizard",
            "chat": "/api/chat - POST - Free-text chat with the advisor",
            "interview": "/api/interview - POST - Open interview with the advisor",
            "docs": "/docs - Interactive API documentation",
            "health": "/health - Health check"
        }
    }


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        service=config.SERVICE_NAME,
        version=config.API_VERSION,
        llm_configured=bool(config.GEMINI_API_KEY)
    )


# Error handlers
@app.exception_handler(IncompleteInputError)
async def incomplete_input_handler(request, exc):
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Unvollständige Daten", "missing_fields": exc.missing}
    )

@app.exception_handler(InvalidTranscriptError)
async def invalid_transcript_handler(request, exc):
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": str(exc)}
    )

@app.exception_handler(AdvisorError)
async def advisor_error_handler(request, exc):
    return JSONResponse(
        status_code=502,
        content={"success": False, "error": "Chat failed", "details": str(exc)}
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": "Invalid request", "details": str(exc.errors())}
    )

@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail}
    )

@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": f"Internal server error: {str(exc)}"}
    )


if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=True,
        log_level=config.LOG_LEVEL.lower()
    )
