"""
Image Gallery – browse, view and download the images of one folder (FastAPI)

Quick start
-----------
1) python -m venv .venv && source .venv/bin/activate  # or .venv\\Scripts\\activate on Windows
2) pip install -e .
3) python app.py 8001 /path/to/photos  # auto-writes templates/static
4) Open http://localhost:8001 → gallery

Notes
-----
• The gallery root is GALLERY_ROOT (or the second CLI argument); it defaults to the current directory.
• Thumbnails are picked up from <root>/thumbnails/ when present; they are never generated here.
• "Download All" builds a temporary zip per request and removes it once sent.
"""

import logging
import os
import sys

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from routes import (
    download,
    download_all,
    gallery,
    image_detail,
    index,
    media,
    thumbnail,
)
from settings import APP_DIR, DEFAULT_TITLE
from templates_static import ensure_assets

# Configuration
STATIC_DIR = APP_DIR / "static"

# Create FastAPI app
app = FastAPI(title=DEFAULT_TITLE)

# Ensure templates and static files exist
ensure_assets()

# Mount static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Routes
app.get("/", response_class=HTMLResponse)(index)
app.get("/gallery", response_class=HTMLResponse)(gallery)
app.get("/image-detail", response_class=HTMLResponse)(image_detail)
app.get("/download")(download)
app.get("/download-all")(download_all)
app.get("/media/{name}")(media)
app.get("/thumbnails/{name}")(thumbnail)


if __name__ == "__main__":
    # Allow `python app.py 8001 /path/to/photos`
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8001
    if len(sys.argv) > 2:
        os.environ["GALLERY_ROOT"] = os.path.abspath(sys.argv[2])
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("GALLERY_DEBUG") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"→ Open http://localhost:{port}")
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=port, reload=True)
