from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse
from typing import List

from registrar.core.exceptions import DataAccessError, NotFoundError
from registrar.dependencies import get_student_store
from registrar.schemas.student import StudentSchema
from registrar.stores.student import StudentStore

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("/", response_model=List[StudentSchema])
async def list_students(store: StudentStore = Depends(get_student_store)):
    """List active students"""
    students = store.list()
    if students is None:
        raise DataAccessError("Could not load the student list")
    return students

@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_student(
    student: StudentSchema,
    store: StudentStore = Depends(get_student_store)
):
    student.id = 0
    if not store.create(student):
        raise DataAccessError("Could not create the student")
    return {"message": "Student created successfully", "id": student.id}

@router.put("/{student_id}")
async def update_student(
    student: StudentSchema,
    student_id: int = Path(..., description="Student ID"),
    store: StudentStore = Depends(get_student_store)
):
    student.id = student_id
    if not store.update(student):
        raise NotFoundError("Student", student_id)
    return {"message": "Student updated successfully", "id": student_id}

@router.delete("/{student_id}")
async def remove_student(
    student_id: int = Path(..., description="Student ID"),
    store: StudentStore = Depends(get_student_store)
):
    """Soft delete a student together with its enrollments"""
    if not store.remove(student_id):
        raise NotFoundError("Student", student_id)
    return JSONResponse(
        content={"message": "Student removed successfully", "id": student_id},
        status_code=status.HTTP_200_OK
    )
