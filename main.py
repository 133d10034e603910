import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import workout
from core.config import settings
from models.exercise import SessionStore
from utils.logger import setup_logging

# Setup logging
logger = setup_logging()
logger.info("Starting FitTracker API")

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Real-time exercise rep counting and form feedback from pose landmarks",
    version="0.1.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify your frontend domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Live workout sessions, kept in memory for the lifetime of the process
app.state.sessions = SessionStore(max_sessions=settings.MAX_ACTIVE_SESSIONS)

# Include routers
app.include_router(workout.router, prefix=settings.API_V1_STR, tags=["Workout Tracking"])

@app.get("/")
def read_root():
    return {"message": "Welcome to FitTracker API", "version": "0.1.0"}

@app.get("/health")
def health_check():
    return {"status": "healthy", "active_sessions": len(app.state.sessions)}

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
