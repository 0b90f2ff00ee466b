from .records import Failure, TRANSPORT_FAILURE, APPLICATION_FAILURE

NO_RESPONSE = "Could not connect to the BigBlueButton server"


class ConfigurationError(ValueError):
    pass


class BigBlueButtonError(Exception):
    r"""
    Raised by BigBlueButton.apiCall when a call fails.  The six meeting
    operations catch it and hand back a Failure record instead.
    """
    kind = None

    def __init__(self, api_call, message, message_key='', detail=''):
        super().__init__(api_call + ': ' + message)
        self.api_call = api_call
        self.message = message
        self.message_key = message_key
        self.detail = detail

    def failure(self):
        return Failure(self.kind, self.message, self.message_key, self.detail)


class TransportFailure(BigBlueButtonError):
    kind = TRANSPORT_FAILURE

    def __init__(self, api_call, detail):
        super().__init__(api_call, NO_RESPONSE, detail=detail)


class ApplicationFailure(BigBlueButtonError):
    kind = APPLICATION_FAILURE
