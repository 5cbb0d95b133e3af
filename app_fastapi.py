# app_fastapi.py
# -*- coding: utf-8 -*-

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.logging import logger
from routers import acts, analysis, health

# ============================================================
# FastAPI app (Swagger description included)
# ============================================================

app = FastAPI(
    title="Diário Oficial - Atos de Pessoal API",
    description="""
Backend for reviewing **personnel acts** published in a Diário Oficial (PDF).

- The frontend uploads the gazette PDF to this API.
- The backend
  - sends the PDF to the AI model and extracts nomeações / exonerações /
    designações / decretos with a strict JSON schema
  - groups the acts by organization with deterministic rules
    (support-team and procurement-agent roles always go to SAD)
  - orders the groups: SAD, then Atos da Governadora, then the other
    organizations alphabetically; the first two come with `auto_expand`
""",
    version="1.0.0",
)

# CORS: open during development, restrict to the frontend domain in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(analysis.router)
app.include_router(acts.router)


@app.get(
    "/debug/routes",
    tags=["debug"],
    summary="Registered routes (debug)",
)
def debug_routes():
    return [r.path for r in app.routes]


logger.info("app_fastapi loaded: %d routes", len(app.routes))

# ============================================================
# uvicorn entry point
# ============================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app_fastapi:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
