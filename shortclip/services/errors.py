class NotFoundError(LookupError):
    pass


class MediaStorageError(Exception):
    pass


class ForbiddenError(Exception):
    pass
