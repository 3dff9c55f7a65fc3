class EventRouterError(Exception):
    pass


class UnknownEventTypeError(EventRouterError):
    def __init__(self, message: str, event: object = None) -> None:
        super().__init__(message)
        self.event = event


class ProtocolError(EventRouterError):
    pass


class RegistrationError(EventRouterError):
    pass
