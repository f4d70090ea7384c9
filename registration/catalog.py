from typing import Iterable, List, Set

from pydantic import BaseModel, Field


class Course(BaseModel):
    id: str = Field(..., description="Course code stored on the record")
    label: str = Field(..., description="Display label")


DEFAULT_COURSES = [
    Course(id="math", label="Mathematics"),
    Course(id="science", label="Science"),
    Course(id="history", label="History"),
    Course(id="literature", label="Literature"),
]


class CourseCatalog:
    def __init__(self, courses: Iterable[Course] = DEFAULT_COURSES):
        self._courses: List[Course] = list(courses)

    def list_courses(self) -> List[Course]:
        return list(self._courses)

    def ids(self) -> Set[str]:
        return {c.id for c in self._courses}

    def __contains__(self, course_id: object) -> bool:
        return course_id in self.ids()
