from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from apis import menu
from settings import ENVIRONMENT, FRONTEND_ORIGINS

app = FastAPI(
    title="Menu Hub API",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

# CORS middleware for development
if ENVIRONMENT == "development":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

app.include_router(menu.router, prefix="/api")


@app.get("/api/health")
async def root():
    """API health check."""
    return {"message": "Menu Hub API is running"}
