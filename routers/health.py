# routers/health.py
from fastapi import APIRouter

router = APIRouter()

@router.get("/", summary="Health check", tags=["health"])
def root():
    return {"message": "Diário Oficial - extração de atos de pessoal em execução"}
