from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse
from typing import List

from registrar.core.exceptions import DataAccessError, NotFoundError, ValidationError
from registrar.dependencies import get_enrollment_store
from registrar.schemas.enrollment import EnrollmentSchema, EnrollmentView
from registrar.stores.enrollment import EnrollmentStore

router = APIRouter(prefix="/enrollments", tags=["Enrollments"])


@router.get("/", response_model=List[EnrollmentView])
async def list_enrollments(store: EnrollmentStore = Depends(get_enrollment_store)):
    """List live enrollments with their student and courses"""
    views = store.list_joined()
    if views is None:
        raise NotFoundError("Enrollments")
    if not views:
        raise DataAccessError("Could not load the enrollment list")
    return views

@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_enrollment(
    enrollment: EnrollmentSchema,
    store: EnrollmentStore = Depends(get_enrollment_store)
):
    """Create an enrollment.

    The store cannot tell an unknown student or course (foreign key
    violation) from an outage, so any failure is answered as bad input.
    """
    enrollment.id = 0
    if not store.create(enrollment):
        raise ValidationError("Could not create the enrollment", "student_id, course_id")
    return {"message": "Enrollment created successfully", "id": enrollment.id}

@router.put("/{enrollment_id}")
async def update_enrollment(
    enrollment: EnrollmentSchema,
    enrollment_id: int = Path(..., description="Enrollment ID"),
    store: EnrollmentStore = Depends(get_enrollment_store)
):
    enrollment.id = enrollment_id
    if not store.update(enrollment):
        raise NotFoundError("Enrollment", enrollment_id)
    return {"message": "Enrollment updated successfully", "id": enrollment_id}

@router.delete("/{enrollment_id}")
async def remove_enrollment(
    enrollment_id: int = Path(..., description="Enrollment ID"),
    store: EnrollmentStore = Depends(get_enrollment_store)
):
    if not store.remove(enrollment_id):
        raise NotFoundError("Enrollment", enrollment_id)
    return JSONResponse(
        content={"message": "Enrollment removed successfully", "id": enrollment_id},
        status_code=status.HTTP_200_OK
    )
