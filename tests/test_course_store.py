import pytest

from registrar.schemas.course import CourseSchema
from registrar.stores.course import CourseStore


def test_create_and_list(course_store, math_course):
    assert course_store.create(math_course) is True
    assert math_course.id > 0

    courses = course_store.list()

    assert len(courses) == 1
    assert courses[0].name == "Math"
    assert courses[0].area == "Science"
    assert courses[0].credit_hours == 40


def test_list_skips_inactive_courses(course_store, math_course):
    physics = CourseSchema(name="Physics", area="Science", credit_hours=60)
    course_store.create(math_course)
    course_store.create(physics)

    course_store.remove(math_course.id)

    assert [c.name for c in course_store.list()] == ["Physics"]


def test_update_course(course_store, math_course):
    course_store.create(math_course)

    updated = CourseSchema(id=math_course.id, name="Calculus", area="Science", credit_hours=80)
    assert course_store.update(updated) is True

    listed = course_store.list()[0]
    assert listed.name == "Calculus"
    assert listed.credit_hours == 80


def test_update_does_not_reactivate(course_store, math_course):
    course_store.create(math_course)
    course_store.remove(math_course.id)

    updated = CourseSchema(id=math_course.id, name="Math II", area="Science", credit_hours=40, active=True)
    assert course_store.update(updated) is True
    assert course_store.list() == []


def test_update_unknown_course(course_store, math_course):
    course_store.create(math_course)

    assert course_store.update(CourseSchema(id=math_course.id + 99, name="X", area="Y", credit_hours=1)) is False

    listed = course_store.list()
    assert [(c.id, c.name, c.area, c.credit_hours) for c in listed] == [
        (math_course.id, "Math", "Science", 40)
    ]


@pytest.mark.parametrize("overrides", [
    {"id": 0},
    {"name": " "},
    {"area": ""},
    {"credit_hours": -1},
])
def test_invalid_update_skips_database(mock_session_factory, overrides):
    data = dict(id=3, name="Math", area="Science", credit_hours=40)
    data.update(overrides)

    assert CourseStore(mock_session_factory).update(CourseSchema(**data)) is False
    mock_session_factory.assert_not_called()


def test_remove_cascades_to_enrollments(
    student_store, course_store, enrollment_store, ana, math_course, make_enrollment
):
    """Scenario: Ana enrolled in Math; removing Math empties the joined list."""
    student_store.create(ana)
    course_store.create(math_course)
    enrollment_store.create(make_enrollment(ana.id, math_course.id))
    assert len(enrollment_store.list_joined()) == 1

    assert course_store.remove(math_course.id) is True

    assert enrollment_store.list_joined() is None
    # the student stays active
    assert [s.id for s in student_store.list()] == [ana.id]


def test_remove_only_cascades_to_own_enrollments(
    student_store, course_store, enrollment_store, ana, math_course, make_enrollment
):
    history = CourseSchema(name="History", area="Humanities", credit_hours=30)
    student_store.create(ana)
    course_store.create(math_course)
    course_store.create(history)
    enrollment_store.create(make_enrollment(ana.id, math_course.id))
    kept = make_enrollment(ana.id, history.id)
    enrollment_store.create(kept)

    course_store.remove(math_course.id)

    views = enrollment_store.list_joined()
    assert [v.enrollment_id for v in views] == [kept.id]


def test_remove_twice(course_store, math_course):
    course_store.create(math_course)

    assert course_store.remove(math_course.id) is True
    assert course_store.remove(math_course.id) is False


def test_database_failure_is_converted(failing_session_factory, math_course):
    store = CourseStore(failing_session_factory)

    assert store.list() is None
    assert store.create(math_course) is False
    assert store.remove(1) is False
    assert store.update(CourseSchema(id=1, name="Math", area="Science", credit_hours=40)) is False
