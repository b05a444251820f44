from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=['health'])


@router.get('/', response_class=PlainTextResponse, summary='Liveness check')
async def health_check() -> str:
	return 'Project is running!'
