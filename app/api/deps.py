from fastapi import Request
from app.core.exceptions import BadRequestException
from app.services.student.datastore import StudentDatastore


def get_datastore(request: Request) -> StudentDatastore:
    """
    Dependency returning the datastore created in the app lifespan.
    """
    return request.app.state.datastore


async def require_body(request: Request):
    """
    Reject a request without a body. A JSON `null` body is accepted and
    decodes to an empty student.
    """
    if not (await request.body()).strip():
        raise BadRequestException("EOF")
