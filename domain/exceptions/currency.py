class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass

class CurrencyNotFoundError(CurrencyException):
    pass

class CurrencyAlreadyExistsError(CurrencyException):
    pass
