from fastapi import status


class ServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class Internal(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
