"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional


class ErrorCode(str, Enum):
    """Error codes surfaced to the response envelope"""

    INVALID_TOKEN = "E001"
    MISSING_PARAMETER = "E002"
    INVALID_AMOUNT = "E003"
    INVALID_TENURE = "E004"
    INVALID_FORMAT = "E005"
    INVALID_RATE = "E006"
    INVALID_INPUT = "E007"
    SERVER_ERROR = "E999"


class DecisionOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class LoanLimits:
    """Business bounds a loan-offer request is validated against"""

    min_amount: float = 10_000
    max_amount: float = 10_000_000
    min_tenure: int = 3  # months
    max_tenure: int = 84  # months
    min_roi: float = 5.5  # annual %
    max_roi: float = 24.0  # annual %
    order_id_pattern: str = r"^ORD[0-9]{6,10}$"
    transaction_id_pattern: str = r"^TXN[0-9]{4,12}$"


@dataclass(frozen=True)
class LoanRequest:
    """Loan-offer request after it passed validation"""

    order_id: str
    transaction_id: str
    loan_amount: float
    roi: float  # annual %
    tenure: int  # months
    downpayment: float
    processing_fee: Any
    external_transaction_id: Any
    redirect_url: Optional[str] = None

    @classmethod
    def from_fields(cls, data: Mapping[str, Any]) -> "LoanRequest":
        """Build from the wire field map (camelCase keys)"""
        return cls(
            order_id=data["orderId"],
            transaction_id=data["transactionId"],
            loan_amount=data["loanAmount"],
            roi=data["roi"],
            tenure=int(data["tenure"]),
            downpayment=data["downpayment"],
            processing_fee=data["processingFee"],
            external_transaction_id=data["externalTransactionId"],
            redirect_url=_optional_text(data.get("backRedirectionURL")),
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one request; carries the first failing rule only"""

    is_valid: bool
    error_code: Optional[ErrorCode] = None
    message: str = ""

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(cls, error_code: ErrorCode, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_code=error_code, message=message)


@dataclass(frozen=True)
class AmortizationEntry:
    """Single period of an amortization schedule, amounts rounded to cents"""

    period: int
    emi: float
    principal_paid: float
    interest_paid: float
    remaining_balance: float


@dataclass(frozen=True)
class LoanQuote:
    """EMI with totals and the full schedule for one set of loan terms"""

    emi: float
    total_interest: float
    total_amount: float
    schedule: List[AmortizationEntry]


@dataclass(frozen=True)
class AuthSignal:
    """Result handed over by the authentication collaborator"""

    authenticated: bool
    identity: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "AuthSignal":
        return cls(authenticated=False)


@dataclass(frozen=True)
class LoanDecision:
    """Accept/reject decision for a loan-offer request"""

    outcome: DecisionOutcome
    reason: str = ""
    error_code: Optional[ErrorCode] = None
    redirect_url: str = ""
    identity: Optional[str] = None
    schedule: Optional[List[AmortizationEntry]] = None

    @property
    def accepted(self) -> bool:
        return self.outcome is DecisionOutcome.ACCEPTED


def _optional_text(value: Any) -> Optional[str]:
    # Optional passthrough fields are echoed back as text, whatever JSON type arrived
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)
