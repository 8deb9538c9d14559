"""
Errors raised by the alignment engine.

InvalidBirthDateError is the only error a well-formed call can see.
TerminologyLeakViolation marks an internal defect and should only ever
surface in tests.
"""


class InvalidBirthDateError(ValueError):
    """Birth date missing or unparseable."""

    def __init__(self, value, reason: str = ""):
        self.value = value
        message = f"Invalid birth date: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class TerminologyLeakViolation(AssertionError):
    """Generated text contains vocabulary of the underlying systems."""

    def __init__(self, text: str, terms):
        self.text = text
        self.terms = tuple(terms)
        super().__init__(f"Banned terms {list(self.terms)} in generated text: {text!r}")
