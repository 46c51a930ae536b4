import logging
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.core.exceptions import DataNotFoundError, InternalServerError, StorageError
from app.models.student import Student as StudentModel
from app.schemas.student import Student

logger = logging.getLogger(__name__)


def _driver_message(exc: SQLAlchemyError) -> str:
    """Return the database driver's own error text, without SQLAlchemy's SQL dump."""
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig)
    return str(exc)


class StudentDatastore:
    """
    CRUD operations over the `students` table.

    Every method runs a single statement in its own short-lived session and
    holds no student state between calls. With `report_missing` enabled,
    update and delete raise DataNotFoundError when no row matched.
    """

    def __init__(self, session_factory: sessionmaker, report_missing: bool = False):
        self._session_factory = session_factory
        self._report_missing = report_missing

    def save(self, student: Student) -> None:
        """Insert a new student; a duplicate NIM raises StorageError."""
        try:
            with self._session_factory.begin() as db:
                db.add(StudentModel(**student.model_dump()))
        except SQLAlchemyError as exc:
            logger.error(f"Failed to save student {student.nim!r}: {exc}")
            raise StorageError(_driver_message(exc)) from exc

    def delete_by_nim(self, nim: str) -> int:
        """Delete the student with this NIM and return the rows affected."""
        statement = (
            delete(StudentModel)
            .where(StudentModel.nim == nim)
            .execution_options(synchronize_session=False)
        )
        try:
            with self._session_factory.begin() as db:
                rowcount = db.execute(statement).rowcount
        except SQLAlchemyError as exc:
            logger.error(f"Failed to delete student {nim!r}: {exc}")
            raise StorageError(_driver_message(exc)) from exc

        logger.info(f"Delete {nim!r}: {rowcount} row(s) affected")
        if rowcount == 0 and self._report_missing:
            raise DataNotFoundError()
        return rowcount

    def update_by_nim(self, student: Student) -> int:
        """
        Overwrite name, age and address of the student with `student.nim`.

        Never inserts; returns the rows affected.
        """
        statement = (
            update(StudentModel)
            .where(StudentModel.nim == student.nim)
            .values(name=student.name, age=student.age, address=student.address)
            .execution_options(synchronize_session=False)
        )
        try:
            with self._session_factory.begin() as db:
                rowcount = db.execute(statement).rowcount
        except SQLAlchemyError as exc:
            logger.error(f"Failed to update student {student.nim!r}: {exc}")
            raise StorageError(_driver_message(exc)) from exc

        logger.info(f"Update {student.nim!r}: {rowcount} row(s) affected")
        if rowcount == 0 and self._report_missing:
            raise DataNotFoundError()
        return rowcount

    def find_all(self) -> List[Student]:
        """All students in the store's scan order."""
        try:
            with self._session_factory() as db:
                rows = db.scalars(select(StudentModel)).all()
                return [Student.model_validate(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.error(f"Failed to list students: {exc}")
            raise StorageError(_driver_message(exc)) from exc

    def find_by_nim(self, nim: str) -> Student:
        try:
            with self._session_factory() as db:
                row = db.get(StudentModel, nim)
                if row is None:
                    raise DataNotFoundError()
                return Student.model_validate(row)
        except SQLAlchemyError as exc:
            logger.error(f"Failed to find student {nim!r}: {exc}")
            raise InternalServerError() from exc
