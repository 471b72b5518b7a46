"""Custom errors for the date picker helpers."""

class DatePickerError(RuntimeError):
    pass


class EmptyDateSequenceError(DatePickerError, ValueError):
    pass


class ConfigurationError(DatePickerError, ValueError):
    pass
