from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from synsplit.core.config import settings
from synsplit.core.logging_config import setup_logging
from synsplit.api.v1.routes.system import router as system_router
from synsplit.api.v1.routes.group import router as group_router
from synsplit.api.v1.routes.expense import router as expense_router
from synsplit.api.v1.routes.contribution import router as contribution_router
from synsplit.api.v1.routes.settlement import router as settlement_router
from synsplit.api.v1.routes.balances import router as balances_router
from synsplit.api.v1.routes.recurring import router as recurring_router
from synsplit.api.v1.routes.analytics import router as analytics_router

setup_logging()

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    return {"message": "SynSplit Backend is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(group_router, prefix="/api/v1/groups")
app.include_router(contribution_router, prefix="/api/v1/groups")
app.include_router(settlement_router, prefix="/api/v1/groups")
app.include_router(expense_router, prefix="/api/v1")
app.include_router(balances_router, prefix="/api/v1")
app.include_router(recurring_router, prefix="/api/v1")
app.include_router(analytics_router, prefix="/api/v1")
