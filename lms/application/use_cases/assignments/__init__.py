"""Use cases for assignments and their submissions."""

from .create_assignment import create_assignment
from .grade_submission import grade_submission
from .submit_assignment import submit_assignment

__all__ = ["create_assignment", "grade_submission", "submit_assignment"]
