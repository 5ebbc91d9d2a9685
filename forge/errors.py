class ForgeError(Exception):
    """Base exception for Forge domain errors."""

    pass


class TaskNotFoundError(ForgeError):
    """Raised when a referenced task id does not exist in the store."""

    def __init__(self, task_id: str):
        super().__init__(f"Task '{task_id}' not found")
        self.task_id = task_id


class InvalidTransitionError(ForgeError):
    """Raised when a task is not in the status an operation requires."""

    def __init__(self, task_id: str, status: str, expected: str):
        super().__init__(f"Task '{task_id}' is {status}, expected {expected}")
        self.task_id = task_id
        self.status = status
        self.expected = expected


class ValidationError(ForgeError, ValueError):
    """Raised when input is malformed or missing a required value."""

    pass


class ConfigError(ForgeError):
    """Raised when the config file has an invalid structure."""

    pass
