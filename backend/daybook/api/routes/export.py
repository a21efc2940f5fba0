"""Export Routes — plain-text download of entries in a date range."""

from datetime import date

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from daybook.api.dependencies import get_export_service, require_identity
from daybook.core.identity import Identity
from daybook.services.export_service import ExportService

router = APIRouter(prefix="/api/v1/export", tags=["export"])


@router.get("/text", response_class=PlainTextResponse)
async def export_text(
    start: date,
    end: date,
    identity: Identity = Depends(require_identity),
    service: ExportService = Depends(get_export_service),
):
    text = (await service.export_text(identity, start, end)).unwrap()
    filename = f"journal_{start.isoformat()}_{end.isoformat()}.txt"
    return PlainTextResponse(
        text, headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
