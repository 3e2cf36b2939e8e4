"""
API route handlers for property listings, including the region/type grid.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from listing_engine.filters import FilterSpec
from listing_engine.sorting import sort_listings

from ..catalog import ENGINES, Catalog, get_catalog
from ..config import config
from ..errors import ApiError, ErrorCodes
from ..models import Envelope, FacetStatsOut, GridOut, PropertyOut, RegionBucketOut
from .common import (
    ERROR_RESPONSES, check_pagination, choice, csv_response, not_found, only, page_envelope,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["properties"], responses=ERROR_RESPONSES)

engine = ENGINES["properties"]


def get_property_filters(
    page: int = 1,
    limit: int = config.DEFAULT_PAGE_SIZE,
    region: Optional[str] = None,
    location: Optional[str] = None,
    type: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    bedrooms: Optional[int] = None,
    bathrooms: Optional[int] = None,
    furnished: Optional[bool] = None,
    search: Optional[str] = None,
    sort: Optional[str] = None,
    featured: Optional[bool] = None,
) -> FilterSpec:
    """
    Dependency to extract and validate property filters.

    ``location`` is an alias of ``region``: both match the normalized region
    exactly (``NCR`` finds Metro Manila listings); city names such as
    ``Makati`` are not matched.
    """
    check_pagination(page, limit)
    return FilterSpec(
        region=choice(region) or choice(location),
        category=choice(type) or choice(category),
        min_price=min_price,
        max_price=max_price,
        featured=only(featured),
        search=search,
        attributes={"bedrooms": bedrooms, "bathrooms": bathrooms, "furnished": furnished},
        sort_by=sort,
        page=page,
        limit=limit,
    )


@router.get("/properties", response_model=Envelope[List[PropertyOut]])
async def get_properties(
    spec: FilterSpec = Depends(get_property_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Get properties with filtering, sorting and pagination."""
    try:
        result = engine.query(catalog.properties, spec)
        return page_envelope(
            Envelope[List[PropertyOut]], PropertyOut, result,
            f"Found {len(result.listings)} properties",
        )
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching properties: {e}")
        raise ApiError("Internal server error", ErrorCodes.INTERNAL_SERVER_ERROR, 500)


@router.get("/properties/grid", response_model=Envelope[GridOut])
async def get_property_grid(
    spec: FilterSpec = Depends(get_property_filters),
    cap: Optional[int] = Query(None, ge=1, le=config.MAX_PAGE_SIZE),
    catalog: Catalog = Depends(get_catalog),
):
    """Properties grouped by region, then by type, for the grid view."""
    try:
        result = engine.query_grouped(catalog.properties, spec, leaf_cap=cap)
        grid = GridOut(
            regions=[RegionBucketOut.from_bucket(b) for b in result.buckets],
            stats=FacetStatsOut.from_stats(result.stats),
        )
        return Envelope[GridOut](data=grid, message=f"{len(result.buckets)} regions")
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error building property grid: {e}")
        raise ApiError("Internal server error", ErrorCodes.INTERNAL_SERVER_ERROR, 500)


@router.get("/properties/stats", response_model=Envelope[FacetStatsOut])
async def get_property_stats(
    spec: FilterSpec = Depends(get_property_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Facet counts for the filtered property set."""
    stats = engine.stats(catalog.properties, spec)
    return Envelope[FacetStatsOut](data=FacetStatsOut.from_stats(stats))


@router.get("/properties/export/csv")
async def export_properties_csv(
    spec: FilterSpec = Depends(get_property_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Export the filtered, sorted property set as CSV (no pagination)."""
    try:
        listings = sort_listings(engine.filter(catalog.properties, spec), spec.sort_by)
        return csv_response(listings, "properties.csv")
    except Exception as e:
        logger.error(f"Error exporting CSV: {e}")
        raise ApiError("Error generating CSV export", ErrorCodes.INTERNAL_SERVER_ERROR, 500)


@router.get("/properties/{property_id}", response_model=Envelope[PropertyOut])
async def get_property(property_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get a specific property by ID."""
    listing = catalog.get("properties", property_id)
    if listing is None:
        raise not_found("Property", property_id)
    return Envelope[PropertyOut](data=PropertyOut.model_validate(listing))
