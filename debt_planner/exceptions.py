"""Custom exception hierarchy for debt-planner."""


class DebtPlannerError(Exception):
    """Base exception for all debt-planner errors."""


class InvalidInputError(DebtPlannerError):
    """Raised when caller-supplied input is rejected before simulating."""


class InvalidDebtError(InvalidInputError):
    """Raised when a debt record has a negative or otherwise unusable field."""


class InvalidScenarioError(InvalidInputError):
    """Raised when a what-if scenario definition is invalid."""


class ConfigurationError(DebtPlannerError):
    """Raised when configuration is invalid or missing."""
