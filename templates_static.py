"""Templates and static file generation."""

from pathlib import Path

# Template content
BASE_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{{ title or 'Image Gallery' }}</title>
  <link rel="stylesheet" href="/static/app.css">
</head>
<body>
  <header class="topbar">
    <nav>
      <a href="/gallery" class="brand">🖼 {{ gallery_title or 'Image Gallery' }}</a>
      <a href="/download-all">Download All</a>
    </nav>
  </header>
  <main class="container">
    {% block content %}{% endblock %}
  </main>
</body>
</html>
"""

GALLERY_HTML = """{% extends 'base.html' %}
{% block content %}
<h1>{{ gallery_title }}</h1>
<div class="flash">
  <strong>Note:</strong> Click any image to view full size and download options
</div>
<div class="button-row">
  <a href="/download-all" class="button">Download All Images</a>
  {% if tip_url %}<a href="{{ tip_url }}" target="_blank" class="button tip">Support via Tip</a>{% endif %}
</div>
{% if items %}
<div class="grid">
  {% for item in items %}
  <a class="card" href="/image-detail?image={{ item.name | urlencode }}" id="{{ item.name }}">
    <img src="{{ item.src }}" alt="{{ item.name }}" loading="lazy" />
    <div class="meta"><div class="fn">{{ item.name }}</div></div>
  </a>
  {% endfor %}
</div>
{% else %}
<p class="muted">No images found.</p>
{% endif %}
{% endblock %}
"""

IMAGE_HTML = """{% extends 'base.html' %}
{% block content %}
<h1>Image Details</h1>
<div class="detail">
  <img src="/media/{{ name | urlencode }}" alt="Full size image" />
  <aside>
    <section>
      <div class="kv"><b>File Name</b><span>{{ name }}</span></div>
      <div class="kv"><b>Dimensions</b><span>{{ meta.dimensions }} pixels</span></div>
      <div class="kv"><b>File Size</b><span>{{ meta.size_kb }}</span></div>
      <div class="kv"><b>Image Type</b><span>{{ meta.mime_type }}</span></div>
    </section>
    <section class="actions">
      <a href="/image-detail?image={{ nav.previous | urlencode }}" class="button nav prev">Previous</a>
      <a href="/download?image={{ name | urlencode }}" class="button">Download Image</a>
      <a href="/gallery#{{ name }}" class="button back">Back to Gallery</a>
      <a href="/image-detail?image={{ nav.next | urlencode }}" class="button nav next">Next</a>
    </section>
    <p class="help-text"><strong>iOS Tip:</strong> To save this image to your Photos, press and hold on the image and choose "Save to Photos"</p>
  </aside>
</div>
{% endblock %}
"""

APP_CSS = """:root{--bg:#0f1115;--fg:#e5e7eb;--muted:#a1a1aa;--card:#111318;--brand:#7aa2ff;--tip:#008cff}
*{box-sizing:border-box}body{margin:0;background:var(--bg);color:var(--fg);font:15px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Inter,Ubuntu,Helvetica,Arial}
a{color:var(--brand);text-decoration:none}.muted{color:var(--muted)}
.topbar{position:sticky;top:0;background:#0c0e13;border-bottom:1px solid #1c1f26;z-index:10}
.topbar nav{margin:auto;display:flex;gap:14px;align-items:center;padding:10px}
.topbar .brand{font-weight:700}
.container{margin:20px auto;padding:0 14px}
.grid{display:grid;grid-template-columns:repeat(auto-fill,minmax(min(600px,100%),1fr));gap:10px}
.card{background:var(--card);border:1px solid #1f2430;border-radius:12px;overflow:hidden;display:flex;flex-direction:column}
.card img{width:100%;aspect-ratio:1;object-fit:cover;display:block;background:#090a0d}
.card .meta{padding:10px;text-align:center;font-size:12px}
.fn{word-wrap:break-word}
.button-row{display:flex;justify-content:center;gap:10px;margin:20px 0}
.button{display:inline-block;background:#4caf50;color:white;padding:10px 20px;border-radius:5px;font-size:14px}
.button.tip{background:var(--tip)}.button.back{background:#374151}
.flash{background:#13221d;border:1px solid #214d39;padding:10px;border-radius:10px}
.detail{display:grid;grid-template-columns:minmax(300px,2fr) minmax(280px,1fr);gap:20px;align-items:start}@media (max-width:768px){.detail{grid-template-columns:1fr;gap:16px}}.detail img{max-width:100%;height:auto;max-height:80vh;object-fit:contain;border-radius:8px;background:#0a0d12;box-shadow:0 4px 12px rgba(0,0,0,0.3)}
.kv{display:flex;justify-content:space-between;gap:12px}
.actions{display:flex;flex-wrap:wrap;gap:8px;margin:16px 0}
.help-text{font-size:13px;color:var(--muted);margin:6px 0 16px 0;line-height:1.4}
"""


def ensure_assets() -> None:
    """Write templates/static next to this file so the app is standalone."""
    APP_DIR = Path(__file__).resolve().parent
    TEMPLATES_DIR = APP_DIR / "templates"
    STATIC_DIR = APP_DIR / "static"

    TEMPLATES_DIR.mkdir(parents=True, exist_ok=True)
    STATIC_DIR.mkdir(parents=True, exist_ok=True)
    files = {
        TEMPLATES_DIR / "base.html": BASE_HTML,
        TEMPLATES_DIR / "gallery.html": GALLERY_HTML,
        TEMPLATES_DIR / "image.html": IMAGE_HTML,
        STATIC_DIR / "app.css": APP_CSS,
    }
    for p, content in files.items():
        if not p.exists() or p.read_text(encoding="utf-8") != content:
            p.write_text(content, encoding="utf-8")
