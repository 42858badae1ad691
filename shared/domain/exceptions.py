"""
Engine Error Taxonomy

Every error the booking/inventory engine reports to a caller derives from
EngineError and carries the HTTP status the API layer answers with.
Soft per-item inventory shortfalls are not exceptions; they travel inside
DeductionResult.
"""


class EngineError(Exception):
    """Base class for errors surfaced by the engine"""
    status_code = 500
    code = 'engine_error'

    def __init__(self, message: str = ''):
        super().__init__(message or self.__class__.__doc__ or self.code)
        self.message = str(self)


class NotFoundError(EngineError):
    """Requested record does not exist"""
    status_code = 404
    code = 'not_found'


class DomainValidationError(EngineError):
    """Request is missing required input or is malformed"""
    status_code = 400
    code = 'invalid'


class ConflictError(EngineError):
    """Request conflicts with the current state of the record"""
    status_code = 409
    code = 'conflict'


class TransactionFailedError(EngineError):
    """Database transaction failed and was rolled back"""
    status_code = 500
    code = 'transaction_failed'
