from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional
from app.api.deps import get_datastore, require_body
from app.core.exceptions import NotFoundException, StorageError
from app.schemas.student import Student
from app.services.student.datastore import StudentDatastore

router = APIRouter()


@router.get("", response_model=List[Student])
def get_students(datastore: StudentDatastore = Depends(get_datastore)):
    """
    List every student (empty list when the store is empty)
    """
    return datastore.find_all()


@router.get("/{nim}", response_model=Student)
def get_student(nim: str, datastore: StudentDatastore = Depends(get_datastore)):
    """
    Get one student by NIM

    - 404 `data not found` when no student has this NIM
    - 500 on any other storage failure
    """
    return datastore.find_by_nim(nim)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    dependencies=[Depends(require_body)],
)
def create_student(
    student: Optional[Student] = Body(None),
    datastore: StudentDatastore = Depends(get_datastore)
):
    """
    Create a student and answer with its NIM as plain text.

    The NIM is not validated; a duplicate NIM answers 500 with the
    database's constraint message. A `null` body creates an empty student.
    """
    student = student or Student()
    datastore.save(student)
    return PlainTextResponse(student.nim, status_code=status.HTTP_201_CREATED)


@router.put("", dependencies=[Depends(require_body)])
def update_student(
    student: Optional[Student] = Body(None),
    datastore: StudentDatastore = Depends(get_datastore)
):
    """
    Overwrite name, age and address of the student identified by `nim`
    """
    try:
        datastore.update_by_nim(student or Student())
    except StorageError as exc:
        raise NotFoundException(exc.message) from exc
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{nim}")
def delete_student(nim: str, datastore: StudentDatastore = Depends(get_datastore)):
    try:
        datastore.delete_by_nim(nim)
    except StorageError as exc:
        raise NotFoundException(exc.message) from exc
    return Response(status_code=status.HTTP_200_OK)
