class ServiceError(Exception):
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    code = "BAD_USER_INPUT"


class NotFoundError(ServiceError):
    code = "NOT_FOUND"


class ConflictError(ServiceError):
    code = "CONFLICT"


class AuthenticationError(ServiceError):
    code = "UNAUTHENTICATED"


class PermissionDeniedError(ServiceError):
    code = "FORBIDDEN"
