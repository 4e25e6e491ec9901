from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report that the career assistant is up.")
async def health_check():
    return {"status": "healthy"}
