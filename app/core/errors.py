from fastapi import status


class PlaylistApiError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PlaylistApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(PlaylistApiError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreError(OSError):
    """Raised when the playlist data file cannot be read, parsed or written."""
