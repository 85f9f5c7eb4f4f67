from fastapi import APIRouter, Depends

from calc_api.models.calculator import CalculationRequest, CalculationResponse
from calc_api.services.calculator import CalculatorService

router = APIRouter(tags=["calculator"])


def get_calculator_service() -> CalculatorService:
    return CalculatorService.from_settings()


@router.post("/calculate", response_model=CalculationResponse)
async def calculate_expression(
    request: CalculationRequest,
    service: CalculatorService = Depends(get_calculator_service),
) -> CalculationResponse:
    outcome = service.evaluate(request.expression)
    return CalculationResponse(result=outcome.result)
