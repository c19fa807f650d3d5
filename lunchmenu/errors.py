class MenuError(RuntimeError):
    """Base class for every failure that aborts a menu run."""


class InvalidWeekError(MenuError, ValueError):
    pass


class InvalidDayError(MenuError, ValueError):
    pass


class NoMenuOnWeekendError(MenuError, ValueError):
    pass


class FetchError(MenuError):
    def __init__(self, message, url=None, status_code=None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MenuNotFoundError(MenuError):
    pass


class PdfParseError(MenuError):
    pass


class ConfigError(MenuError, ValueError):
    pass
