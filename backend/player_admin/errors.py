class PlayerAdminError(Exception):
    """Client-facing failure; rendered as ``{"detail": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(PlayerAdminError):
    status_code = 400


class NotFoundError(PlayerAdminError):
    status_code = 404
