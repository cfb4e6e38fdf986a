class WorkoutLogError(Exception):
    """Base for domain errors raised by the repositories.

    Each subclass carries the HTTP status the route boundary maps it to.
    """

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class NotFoundError(WorkoutLogError):
    status_code = 404

class ConflictError(WorkoutLogError):
    """A unique constraint (workout name) was violated."""

    status_code = 409
