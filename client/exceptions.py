class ApiError(Exception):
    """
    Raised when the API answers with an error envelope or cannot be reached.

    status_code is None for transport errors (timeouts, refused connections).
    """

    def __init__(self, message, status_code=None, code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.payload = payload or {}

    def __str__(self):
        if self.status_code:
            return f"{self.status_code} {self.code or 'ERROR'}: {self.message}"
        return self.message
