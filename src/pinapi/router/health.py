"""
Health Check Router
"""

import platform
from datetime import datetime

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check if the API service is running normally")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "service": "Pin Trainer API",
        "version": "1.0.0",
        "python_version": platform.python_version(),
    }
