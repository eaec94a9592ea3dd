"""Repository exceptions"""


class PersistenceError(Exception):
    """A document store could not be written"""

    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        super().__init__(message)
