"""
API route for CSV export of displayed series.
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from solarcalc.config import CSV_MEDIA_TYPE
from solarcalc.engine.csv_export import export_filename, to_delimited_text
from solarcalc.models.export import ExportInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["export"])


@router.post("/export/csv")
async def export_csv(body: ExportInput) -> Response:
    """
    Export the points currently on display as a downloadable CSV file.

    The client sends the points it charted, so the file matches the chart
    rather than a fresh draw of the noise.
    """
    try:
        content = to_delimited_text(body.points)
        filename = export_filename(body.view)
        return Response(
            content=content,
            media_type=CSV_MEDIA_TYPE,
            headers={
                "Content-Disposition": f'attachment; filename="{filename}"',
            },
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except Exception as exc:
        logger.warning("CSV export failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
