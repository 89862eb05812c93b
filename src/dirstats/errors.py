"""Defines a set of errors and warnings raised by the package."""


class DirstatsError(Exception):
    pass


class EmptyInputError(DirstatsError, ValueError):
    pass


class ConvergenceWarning(UserWarning):
    pass
