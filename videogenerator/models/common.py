from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class IntegrationStatus(BaseModel):
    configured: bool
    model: str | None = None


class StatusResponse(BaseModel):
    integrations: dict[str, IntegrationStatus]
