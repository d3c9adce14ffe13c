"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional

from loan_offer_engine.domain.models import AmortizationEntry, LoanQuote


class CamelModel(BaseModel):
    """Wire models use camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoanOfferRequest(BaseModel):
    """Request body for POST /fkApiServices.do?action=loanOffer and /api/loan/validate"""

    token: Optional[str] = Field(None, description="Authentication token")
    data: Optional[Dict[str, Any]] = Field(None, description="Loan request fields")


class CalculateRequest(CamelModel):
    """Request body for POST /api/loan/calculate; values are parsed by the handler"""

    loan_amount: Any = None
    roi: Any = None
    tenure: Any = None


class ErrorData(CamelModel):
    """Payload of an error envelope (also the empty payload of an accepted offer)"""

    error_message: str = ""
    error_code: str = ""
    redirection_url: str = Field("", alias="redirectionURL")


class ResponseEnvelope(CamelModel):
    """Standard response wrapper: statusCode is SR on success, ER on error"""

    data: Dict[str, Any] = Field(default_factory=dict)
    status_message: str
    status_code: str


class ScheduleEntrySchema(CamelModel):
    """Single period of an amortization schedule"""

    month: int
    emi: float
    principal_paid: float
    interest_paid: float
    balance: float

    @classmethod
    def from_entry(cls, entry: AmortizationEntry) -> "ScheduleEntrySchema":
        return cls(
            month=entry.period,
            emi=entry.emi,
            principal_paid=entry.principal_paid,
            interest_paid=entry.interest_paid,
            balance=entry.remaining_balance,
        )


class CalculationData(CamelModel):
    """Payload of a successful /api/loan/calculate response"""

    emi: float
    total_interest: float
    total_amount: float
    schedule: List[ScheduleEntrySchema]

    @classmethod
    def from_quote(cls, quote: LoanQuote) -> "CalculationData":
        return cls(
            emi=quote.emi,
            total_interest=quote.total_interest,
            total_amount=quote.total_amount,
            schedule=[ScheduleEntrySchema.from_entry(entry) for entry in quote.schedule],
        )
