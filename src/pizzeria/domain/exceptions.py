"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Order errors -------------------------------------------------------------


class OrderError(DomainException):
    """Failures while creating or handing over an order."""


class NoPizzaSelectedError(OrderError):

    def __init__(self) -> None:
        super().__init__("Pizza not selected")


class MissingCustomerNameError(OrderError):

    def __init__(self) -> None:
        super().__init__("Customer name missing")


class OrderQueueError(OrderError):
    """The in-process order queue could not send or receive."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Order queue failure: {reason}")
        self.reason = reason


# --- Billing errors -----------------------------------------------------------


class BillingError(DomainException):
    """Failures raised by payment adapters and the billing engine."""


class PaymentFailedError(BillingError):

    def __init__(self, reason: str) -> None:
        super().__init__(f"Payment failed: {reason}")
        self.reason = reason


class InvoiceGenerationError(BillingError):

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invoice generation failed: {reason}")
        self.reason = reason


class InvalidPaymentMethodError(BillingError):

    def __init__(self, method: object = None) -> None:
        super().__init__("Invalid payment method selected")
        self.method = method
