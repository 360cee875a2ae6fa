"""Presentation endpoints: upload/split, publish, slide editing, rendering and export.

Parsing runs through asyncio.to_thread so large uploads do not block the
event loop.
"""

import asyncio
import logging
from typing import List, NoReturn, Optional

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import HTMLResponse, Response

from deck_gallery.api.models.requests import EditorMessageRequest, PublishRequest, UpdateSlideRequest
from deck_gallery.api.models.responses import (
    EditorMessageResponse,
    PresentationDetail,
    PresentationSummary,
    SplitResponse,
)
from deck_gallery.services.gallery_service import get_gallery_service
from deck_gallery.services.player_export import build_player_html, player_filename
from deck_gallery.utils.error_handling import (
    ResourceNotFoundError,
    SlideDeletionError,
    ValidationError,
    format_exception_for_logging,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/presentations", tags=["presentations"])


def _raise_http_error(e: Exception, action: str) -> NoReturn:
    """Translate a service error into an HTTPException."""
    if isinstance(e, HTTPException):
        raise e
    if isinstance(e, ResourceNotFoundError):
        raise HTTPException(status_code=404, detail=e.message)
    if isinstance(e, ValidationError):
        raise HTTPException(status_code=400, detail=e.message)
    if isinstance(e, SlideDeletionError):
        raise HTTPException(status_code=409, detail=e.message)

    logger.error(f"Failed to {action}: {e}", exc_info=True, extra=format_exception_for_logging(e))
    raise HTTPException(status_code=500, detail=str(e))


async def _read_uploads(files: List[UploadFile]) -> list[tuple[str, bytes]]:
    return [(upload.filename or "", await upload.read()) for upload in files]


def _split_tags(tags: str) -> list[str]:
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


@router.post("/split", response_model=SplitResponse)
async def split_files(files: List[UploadFile] = File(...)):
    """Split uploaded HTML files into standalone slides without storing them.

    Reveal.js decks yield one slide per leaf section; any other file is a
    single slide.
    """
    try:
        uploads = await _read_uploads(files)
        slides = await asyncio.to_thread(get_gallery_service().split_files, uploads)
        logger.info("Split uploaded files", extra={"file_count": len(uploads), "slide_count": len(slides)})
        return SplitResponse(slides=slides, slide_count=len(slides))
    except Exception as e:
        _raise_http_error(e, "split uploaded files")


@router.post("", response_model=PresentationDetail, status_code=201)
async def upload_presentation(
    files: List[UploadFile] = File(...),
    title: str = Form(...),
    description: str = Form(""),
    thumbnail_url: str = Form(""),
    framework: str = Form("Custom HTML"),
    privacy: str = Form("Public"),
    tags: str = Form("", description="Comma separated tags"),
    use_thumbnail_as_cover: bool = Form(False),
):
    """Upload HTML files and publish them as a new presentation."""
    try:
        uploads = await _read_uploads(files)
        presentation = await asyncio.to_thread(
            get_gallery_service().create_from_uploads,
            uploads,
            title,
            description=description,
            thumbnail_url=thumbnail_url,
            framework=framework,
            privacy=privacy,
            tags=_split_tags(tags),
            use_thumbnail_as_cover=use_thumbnail_as_cover,
        )
        return presentation.to_dict()
    except Exception as e:
        _raise_http_error(e, "upload presentation")


@router.post("/publish", response_model=PresentationDetail, status_code=201)
async def publish_presentation(request: PublishRequest):
    """Publish already split slides, or republish an existing presentation by id."""
    try:
        presentation = get_gallery_service().publish(
            request.slides,
            request.title,
            description=request.description,
            thumbnail_url=request.thumbnail_url,
            framework=request.framework,
            privacy=request.privacy,
            tags=request.tags,
            use_thumbnail_as_cover=request.use_thumbnail_as_cover,
            presentation_id=request.presentation_id,
        )
        return presentation.to_dict()
    except Exception as e:
        _raise_http_error(e, "publish presentation")


@router.get("", response_model=list[PresentationSummary])
async def list_presentations():
    """List presentations, newest first."""
    return [p.summary() for p in get_gallery_service().list_presentations()]


@router.get("/{presentation_id}", response_model=PresentationDetail)
async def get_presentation(presentation_id: str):
    """Get a presentation with all slide documents."""
    try:
        return get_gallery_service().get_presentation(presentation_id).to_dict()
    except Exception as e:
        _raise_http_error(e, "get presentation")


@router.delete("/{presentation_id}", status_code=204)
async def delete_presentation(presentation_id: str):
    """Delete a presentation."""
    try:
        get_gallery_service().delete_presentation(presentation_id)
        return Response(status_code=204)
    except Exception as e:
        _raise_http_error(e, "delete presentation")


@router.post("/{presentation_id}/views")
async def record_view(presentation_id: str):
    """Increment a presentation's view counter."""
    try:
        return {"views": get_gallery_service().record_view(presentation_id)}
    except Exception as e:
        _raise_http_error(e, "record view")


@router.get("/{presentation_id}/slides/{index}", response_class=HTMLResponse)
async def get_slide(
    presentation_id: str,
    index: int,
    fit: Optional[bool] = Query(None, description="Inject the fit-to-width script"),
):
    """Return one slide document ready to load into a sandboxed frame."""
    try:
        return HTMLResponse(get_gallery_service().render_slide(presentation_id, index, fit=fit))
    except Exception as e:
        _raise_http_error(e, "get slide")


@router.put("/{presentation_id}/slides/{index}", response_model=PresentationDetail)
async def update_slide(presentation_id: str, index: int, request: UpdateSlideRequest):
    """Replace one slide's document wholesale."""
    try:
        service = get_gallery_service()
        service.update_slide(presentation_id, index, request.html)
        return service.get_presentation(presentation_id).to_dict()
    except Exception as e:
        _raise_http_error(e, "update slide")


@router.delete("/{presentation_id}/slides/{index}", response_model=PresentationDetail)
async def delete_slide(presentation_id: str, index: int):
    """Delete one slide. A presentation keeps at least one slide (409)."""
    try:
        return get_gallery_service().delete_slide(presentation_id, index).to_dict()
    except Exception as e:
        _raise_http_error(e, "delete slide")


@router.post(
    "/{presentation_id}/slides/{index}/editor-message",
    response_model=EditorMessageResponse,
)
async def apply_editor_message(presentation_id: str, index: int, request: EditorMessageRequest):
    """Apply a message posted by the visual editor frame to a slide."""
    try:
        changed = get_gallery_service().apply_editor_message(
            presentation_id, index, request.model_dump()
        )
        return EditorMessageResponse(changed=changed)
    except Exception as e:
        _raise_http_error(e, "apply editor message")


@router.get("/{presentation_id}/export", response_class=HTMLResponse)
async def export_player(presentation_id: str):
    """Download the presentation as a single self-contained HTML player."""
    try:
        presentation = get_gallery_service().get_presentation(presentation_id)
        content = await asyncio.to_thread(build_player_html, presentation)
        filename = player_filename(presentation.title)
        return HTMLResponse(
            content,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
    except Exception as e:
        _raise_http_error(e, "export presentation")
