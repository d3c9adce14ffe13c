"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_offer_engine.domain.models import LoanLimits


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-offer-engine"
    environment: str = "development"
    log_level: str = "INFO"

    # Auth
    token_secret: str = "loanOfferServiceSecretKey"
    token_min_length: int = 32

    # Loan limits
    min_loan_amount: float = 10_000
    max_loan_amount: float = 10_000_000
    min_tenure_months: int = 3
    max_tenure_months: int = 84
    min_roi: float = 5.5  # Annual percent
    max_roi: float = 24.0

    # Identifier formats
    order_id_pattern: str = r"^ORD[0-9]{6,10}$"
    transaction_id_pattern: str = r"^TXN[0-9]{4,12}$"

    def loan_limits(self) -> LoanLimits:
        """Snapshot of the business bounds handed to the domain components"""
        return LoanLimits(
            min_amount=self.min_loan_amount,
            max_amount=self.max_loan_amount,
            min_tenure=self.min_tenure_months,
            max_tenure=self.max_tenure_months,
            min_roi=self.min_roi,
            max_roi=self.max_roi,
            order_id_pattern=self.order_id_pattern,
            transaction_id_pattern=self.transaction_id_pattern,
        )


settings = Settings()
