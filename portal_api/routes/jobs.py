"""
API route handlers for job postings.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from listing_engine.filters import FilterSpec
from listing_engine.sorting import sort_listings

from ..catalog import ENGINES, Catalog, get_catalog
from ..config import config
from ..errors import ApiError, ErrorCodes
from ..models import Envelope, FacetStatsOut, JobOut
from .common import (
    ERROR_RESPONSES, check_pagination, choice, csv_response, not_found, only, page_envelope,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["jobs"], responses=ERROR_RESPONSES)

engine = ENGINES["jobs"]


def get_job_filters(
    page: int = 1,
    limit: int = config.DEFAULT_PAGE_SIZE,
    job_type: Optional[str] = Query(None, alias="jobType"),
    location: Optional[str] = None,
    region: Optional[str] = None,
    experience_level: Optional[str] = Query(None, alias="experienceLevel"),
    category: Optional[str] = None,
    salary_min: Optional[float] = Query(None, alias="salaryMin"),
    salary_max: Optional[float] = Query(None, alias="salaryMax"),
    search: Optional[str] = None,
    sort: Optional[str] = None,
    featured: Optional[bool] = None,
    remote: Optional[bool] = None,
) -> FilterSpec:
    """
    Dependency to extract and validate job filters.

    ``location`` is an alias of ``region``: both match the normalized region
    exactly (``NCR`` finds Metro Manila listings); city names such as
    ``Makati`` are not matched.
    """
    check_pagination(page, limit)
    return FilterSpec(
        region=choice(region) or choice(location),
        category=choice(job_type),
        min_price=salary_min,
        max_price=salary_max,
        featured=only(featured),
        remote=only(remote),
        search=search,
        attributes={
            "experience_level": choice(experience_level),
            "sector": choice(category),
        },
        sort_by=sort,
        page=page,
        limit=limit,
    )


@router.get("/jobs", response_model=Envelope[List[JobOut]])
async def get_jobs(
    spec: FilterSpec = Depends(get_job_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Get job postings with filtering, sorting and pagination."""
    try:
        result = engine.query(catalog.jobs, spec)
        return page_envelope(Envelope[List[JobOut]], JobOut, result, "Jobs retrieved successfully")
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching jobs: {e}")
        raise ApiError("Internal server error", ErrorCodes.INTERNAL_SERVER_ERROR, 500)


@router.get("/jobs/stats", response_model=Envelope[FacetStatsOut])
async def get_job_stats(
    spec: FilterSpec = Depends(get_job_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Facet counts (featured, urgent, remote) for the filtered job set."""
    stats = engine.stats(catalog.jobs, spec)
    return Envelope[FacetStatsOut](data=FacetStatsOut.from_stats(stats))


@router.get("/jobs/export/csv")
async def export_jobs_csv(
    spec: FilterSpec = Depends(get_job_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Export the filtered, sorted job set as CSV."""
    try:
        listings = sort_listings(engine.filter(catalog.jobs, spec), spec.sort_by)
        return csv_response(listings, "jobs.csv")
    except Exception as e:
        logger.error(f"Error exporting CSV: {e}")
        raise ApiError("Error generating CSV export", ErrorCodes.INTERNAL_SERVER_ERROR, 500)


@router.get("/jobs/{job_id}", response_model=Envelope[JobOut])
async def get_job(job_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get a specific job posting by ID."""
    listing = catalog.get("jobs", job_id)
    if listing is None:
        raise not_found("Job", job_id)
    return Envelope[JobOut](data=JobOut.model_validate(listing))
