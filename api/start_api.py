#!/usr/bin/env python3
"""
Succession Advisor API Startup Script
"""

import sys
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

if __name__ == "__main__":
    import uvicorn
    import config

    print("🚀 Starting Succession Advisor API...")
    print(f"📖 API Documentation: http://localhost:{config.API_PORT}/docs")
    print(f"🔍 API Endpoints: http://localhost:{config.API_PORT}/")
    if not config.GEMINI_API_KEY:
        print("⚠️  Warning: GEMINI_API_KEY not set - chat endpoints will fail.")
    print("-" * 50)

    uvicorn.run(
        "api.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=True,
        log_level=config.LOG_LEVEL.lower()
    )
