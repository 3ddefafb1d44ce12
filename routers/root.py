# routers/root.py
from fastapi import APIRouter

API_VERSION = "1.0.0"

router = APIRouter(tags=["Info"])


@router.get("/")
async def welcome():
    """Describes the service and where its endpoints live."""
    return {
        "message": "Welcome to the Task Manager API",
        "version": API_VERSION,
        "endpoints": {
            "tasks": "/tasks",
            "taskById": "/tasks/:id",
        },
    }
