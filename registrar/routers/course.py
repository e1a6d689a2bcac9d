from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse
from typing import List

from registrar.core.exceptions import DataAccessError, NotFoundError
from registrar.dependencies import get_course_store
from registrar.schemas.course import CourseSchema
from registrar.stores.course import CourseStore

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.get("/", response_model=List[CourseSchema])
async def list_courses(store: CourseStore = Depends(get_course_store)):
    """List active courses"""
    courses = store.list()
    if courses is None:
        raise DataAccessError("Could not load the course list")
    return courses

@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_course(
    course: CourseSchema,
    store: CourseStore = Depends(get_course_store)
):
    course.id = 0
    if not store.create(course):
        raise DataAccessError("Could not create the course")
    return {"message": "Course created successfully", "id": course.id}

@router.put("/{course_id}")
async def update_course(
    course: CourseSchema,
    course_id: int = Path(..., description="Course ID"),
    store: CourseStore = Depends(get_course_store)
):
    course.id = course_id
    if not store.update(course):
        raise NotFoundError("Course", course_id)
    return {"message": "Course updated successfully", "id": course_id}

@router.delete("/{course_id}")
async def remove_course(
    course_id: int = Path(..., description="Course ID"),
    store: CourseStore = Depends(get_course_store)
):
    """Soft delete a course together with its enrollments"""
    if not store.remove(course_id):
        raise NotFoundError("Course", course_id)
    return JSONResponse(
        content={"message": "Course removed successfully", "id": course_id},
        status_code=status.HTTP_200_OK
    )
