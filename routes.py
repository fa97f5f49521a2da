"""FastAPI routes for the gallery."""
import logging
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote

from fastapi import BackgroundTasks, HTTPException, Query
from fastapi.responses import (
    FileResponse,
    HTMLResponse,
    PlainTextResponse,
    RedirectResponse,
    StreamingResponse,
)
from jinja2 import Environment, FileSystemLoader, select_autoescape

from archive import build_archive
from errors import ArchiveCreationFailed, GalleryError
from models import ImageEntry
from navigation import neighbors
from scanner import is_image_name, list_images, read_image_meta, select_display_path
from settings import APP_DIR, Settings, get_settings
from utils import resolve_image_name

logger = logging.getLogger(__name__)

# Configuration
TEMPLATES_DIR = APP_DIR / "templates"
GALLERY_URL = "/gallery"
ARCHIVE_FAILED_MESSAGE = "Failed to create zip file"

# Jinja environment
jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


def render(template_name: str, settings: Settings, **ctx) -> HTMLResponse:
    """Render template with context."""
    template = jinja_env.get_template(template_name)
    ctx.setdefault("title", settings.title)
    ctx.setdefault("gallery_title", settings.title)
    return HTMLResponse(template.render(**ctx))


def attachment_header(filename: str) -> str:
    """Content-Disposition value, e.g. ``attachment; filename="a.jpg"``.

    Names that cannot travel in a latin-1 header get an ASCII fallback plus an
    RFC 5987 ``filename*`` parameter.
    """
    escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
    try:
        escaped.encode("latin-1")
    except UnicodeEncodeError:
        fallback = escaped.encode("ascii", "replace").decode("ascii")
        return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quote(filename)}"
    return f'attachment; filename="{escaped}"'


def back_to_gallery() -> RedirectResponse:
    return RedirectResponse(GALLERY_URL, 303)


def scan_gallery(settings: Settings) -> List[ImageEntry]:
    """Fresh index of the gallery root."""
    try:
        return list_images(settings.root_dir, settings.thumb_dirname)
    except OSError as e:
        logger.error("Cannot list gallery root %s: %s", settings.root_dir, e)
        raise HTTPException(500, "Gallery folder is not readable")


def index():
    """Root route redirects to the gallery."""
    return back_to_gallery()


def gallery():
    """List every image, preferring thumbnails for display."""
    settings = get_settings()
    items = []
    for entry in scan_gallery(settings):
        shown = select_display_path(entry, settings.thumb_dir, settings.root_dir)
        prefix = "/thumbnails" if shown.parent == settings.thumb_dir else "/media"
        items.append({"name": entry.name, "src": f"{prefix}/{quote(entry.name)}"})
    return render("gallery.html", settings, items=items, tip_url=settings.tip_url)


def image_detail(image: Optional[str] = Query(None)):
    """Show one image with its metadata and previous/next links."""
    if image is None:
        return back_to_gallery()
    settings = get_settings()
    try:
        resolved = resolve_image_name(image, settings.root_dir)
        meta = read_image_meta(resolved.absolute_path)
        nav = neighbors(scan_gallery(settings), resolved.safe_name)
    except GalleryError as e:
        logger.debug("Detail for %r redirected: %s", image, e)
        return back_to_gallery()
    return render(
        "image.html",
        settings,
        title=resolved.safe_name,
        name=resolved.safe_name,
        meta=meta,
        nav=nav,
    )


def download(image: Optional[str] = Query(None)):
    """Send one image as an attachment."""
    if image is None:
        return back_to_gallery()
    settings = get_settings()
    try:
        resolved = resolve_image_name(image, settings.root_dir)
        meta = read_image_meta(resolved.absolute_path)
    except GalleryError as e:
        logger.debug("Download of %r redirected: %s", image, e)
        return back_to_gallery()
    return FileResponse(
        resolved.absolute_path,
        media_type=meta.mime_type,
        headers={"Content-Disposition": attachment_header(resolved.safe_name)},
    )


def download_all():
    """Zip every image and stream the archive; the zip is removed afterwards."""
    settings = get_settings()
    entries = scan_gallery(settings)
    try:
        job = build_archive(entries, settings.root_dir, settings.archive_dir)
    except ArchiveCreationFailed:
        return PlainTextResponse(ARCHIVE_FAILED_MESSAGE, status_code=500)
    cleanup = BackgroundTasks()
    cleanup.add_task(job.cleanup)
    headers = {
        "Content-Disposition": attachment_header(job.download_name),
        "Content-Length": str(job.size),
    }
    return StreamingResponse(
        job.iter_bytes(),
        media_type="application/zip",
        headers=headers,
        background=cleanup,
    )


def _serve_raw(name: str, directory: Path) -> FileResponse:
    try:
        resolved = resolve_image_name(name, directory)
    except GalleryError:
        raise HTTPException(404, "Not found")
    if not is_image_name(resolved.safe_name) or not resolved.absolute_path.is_file():
        raise HTTPException(404, "Not found")
    return FileResponse(resolved.absolute_path)


def media(name: str):
    """Serve an original image file."""
    settings = get_settings()
    if name == settings.thumb_dirname:
        raise HTTPException(404, "Not found")
    return _serve_raw(name, settings.root_dir)


def thumbnail(name: str):
    """Serve a pre-rendered thumbnail."""
    return _serve_raw(name, get_settings().thumb_dir)
