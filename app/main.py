from fastapi import FastAPI
import logging
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.database import init_db, locked_session
from app.core.exceptions import SeedingError
from app.api import api_router
from app.seeding.services.seeding_service import SeedingService

# Setup logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI()


# The desktop shell's web view calls the API from its own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Ensure the store exists and is seeded before requests are served
@app.on_event("startup")
def startup():
    # StartupFatalError propagates and aborts the server
    init_db()
    logger.info("✅ Store opened and tables created.")

    try:
        with locked_session() as db:
            result = SeedingService(db).seed_if_stale(settings.SOURCE_CSV_PATH)
        logger.info(f"🌱 Seeding finished: {result.status}")
    except SeedingError as e:
        logger.error(f"❌ {e}. Continuing with the current store.")

@app.get("/")
async def home():
    return {"message": "Welcome to Scoreboard Switcher"}

# Include all API routes
app.include_router(api_router)
