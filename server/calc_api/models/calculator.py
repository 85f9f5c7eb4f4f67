from pydantic import BaseModel, Field


class CalculationRequest(BaseModel):
    expression: str = Field("", description="Arithmetic expression to evaluate.")


class CalculationResponse(BaseModel):
    result: str = Field(..., description="The evaluated result as a shortest round-trip decimal.")


class CalculationResult(BaseModel):
    expression: str = Field(..., description="The arithmetic expression that was evaluated.")
    value: float = Field(..., description="The evaluated result as a double.")
    result: str = Field(..., description="The evaluated result formatted for display.")
