from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meal_planner.api.v1.endpoints import router as ingredients_router
from meal_planner.core.config import settings

app = FastAPI(
    title=settings.app_name,
    description="API for turning free-text ingredient lists into structured, categorized records",
    version="1.0.0"
)

# --- CORS: allow the frontend to call this API ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],          # tighten in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ingredients_router, prefix="/api/v1")

@app.get("/")
def read_root():
    return {"message": "Welcome to the Meal Planner API!"}
