"""Use cases for course requests and enrollments."""

from .decide_course_request import decide_course_request
from .enroll_student import enroll_student
from .request_course import request_course

__all__ = ["decide_course_request", "enroll_student", "request_course"]
