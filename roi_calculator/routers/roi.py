# roi_calculator/routers/roi.py
# -----------------------------------------------------------------------------
# /api/calculate-roi : projection + persistence + chart data
# /api/roi-results   : stored results with their relations
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roi_calculator.db import crud
from roi_calculator.db.session import get_session
from roi_calculator.schemas.roi import (
    RoiCalculationRequest,
    RoiCalculationResponse,
    RoiResultListResponse,
    RoiResultOut,
)
from roi_calculator.services.roi import InputValidationError, calculate_roi

router = APIRouter(prefix="/api", tags=["roi"])


@router.get("/roi-results", response_model=RoiResultListResponse)
async def get_all_roi_results(db: AsyncSession = Depends(get_session)):
    try:
        rows = await crud.get_roi_results(db)
    except Exception:
        logger.exception("failed to fetch roi results")
        return JSONResponse(
            status_code=500, content={"message": "Failed to retrieve ROI results"}
        )
    return RoiResultListResponse(
        message="ROI results retrieved successfully!",
        count=len(rows),
        data=[RoiResultOut.model_validate(r) for r in rows],
    )


@router.post(
    "/calculate-roi", response_model=RoiCalculationResponse, status_code=201
)
async def calculate(req: RoiCalculationRequest, db: AsyncSession = Depends(get_session)):
    logger.info("calculate-roi payload: {}", req.model_dump())
    try:
        data = await calculate_roi(db, req)
    except InputValidationError as e:
        return JSONResponse(status_code=400, content={"message": str(e)})
    except Exception as e:
        logger.exception("failed to calculate roi")
        return JSONResponse(
            status_code=500,
            content={
                "message": "An error occurred while calculating ROI",
                "error": str(e),
            },
        )
    return RoiCalculationResponse(message="ROI calculated successfully!", data=data)
