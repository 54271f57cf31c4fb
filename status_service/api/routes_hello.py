"""Static greeting endpoint, added in v2."""

from fastapi import APIRouter

router = APIRouter(tags=["hello"])

HELLO_WORLD_PAYLOAD = {
    "message": "this is next version fully deployed using CI/CD on EC2 using ecr and docker installed on EC2 : v2 of code"
}


@router.get("/helloWorld")
async def hello_world():
    """Return the fixed v2 greeting."""
    return HELLO_WORLD_PAYLOAD
