class CalculationError(ValueError):
    """Base class for every failure raised by the sizing engine."""


class InvalidInputError(CalculationError):
    """A numeric argument violates a precondition (non-positive value, PF out of range...)."""


class RatingOutOfRangeError(CalculationError):
    """The required current is above every rating of the selected table."""

    def __init__(self, required_current: float, standard: str):
        self.required_current = required_current
        self.standard = standard
        super().__init__(
            f'Required current ({required_current:.2f}A) exceeds available MCB sizes '
            f'for standard "{standard}".'
        )
