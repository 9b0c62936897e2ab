class LearningServiceException(Exception):
    """Base exception for the learning service"""

    def __init__(self, message: str = "Learning service error"):
        self.message = message
        super().__init__(self.message)


class BadRequestException(LearningServiceException):
    """Missing or malformed input (400)"""

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class UnauthorizedException(LearningServiceException):
    """Missing or invalid identity token (401)"""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class AccessDeniedException(LearningServiceException):
    """Role or ownership mismatch, or a locked lecture (403)"""

    def __init__(self, message: str = "Access Denied"):
        super().__init__(message)


class ResourceNotFoundException(LearningServiceException):
    """Referenced course or lecture is absent (404)"""

    def __init__(self, message: str = "Resource Not Found"):
        super().__init__(message)


class ConflictException(LearningServiceException):
    """Duplicate registration or order index (409)"""

    def __init__(self, message: str = "Conflict"):
        super().__init__(message)
