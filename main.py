from fastapi import FastAPI

from services.order_service.main import order_app, create_tables

app = FastAPI(title="Pizza Shop")

@app.on_event("startup")
async def startup_event():
    # Mounted apps do not receive lifespan events, so the schema is created here
    await create_tables()

app.mount("/", order_app)
