import time
import logging

from fastapi import APIRouter

from advisory_content import MARKET_FACTS
from data_models import AnalysisResult, SuccessionInput
from succession_engine import assemble, format_analysis_report
from api.models.responses import ErrorResponse, ReportResponse, StatisticsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Analysis"])


@router.post("/analyse", response_model=AnalysisResult, responses={400: {"model": ErrorResponse}})
async def analyse(record: SuccessionInput):
    """
    Classify a questionnaire and return the full succession analysis

    Missing required answers are rejected with 400 by the app-level handler.
    """
    start_time = time.time()
    result = assemble(record)
    logger.info(f"Analysis complete: scenario={result.scenario.value}, priority={result.priority.value} "
                f"({(time.time() - start_time) * 1000:.1f} ms)")
    return result


@router.post("/analyse/report", response_model=ReportResponse, responses={400: {"model": ErrorResponse}})
async def analyse_with_report(record: SuccessionInput):
    """Analysis plus the formatted plain-text report"""
    result = assemble(record)
    return ReportResponse(analysis=result, report=format_analysis_report(result))


@router.get("/statistiken", response_model=StatisticsResponse)
async def statistics():
    """Static facts and figures on business succession"""
    return StatisticsResponse(**MARKET_FACTS)
