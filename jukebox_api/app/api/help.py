"""
Help page.

Served at the site root so that a browser pointed at the service
gets a short description of the listing endpoint and its parameters.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse


router = APIRouter()


HELP_PAGE = """<!DOCTYPE html>
<html>
<head><title>Jukebox API</title></head>
<body>
<h1>Jukebox API</h1>
<p><code>GET /api</code> (or <code>/api/v1/jukeboxes/</code>) lists jukeboxes.
All parameters are optional and can be combined; a jukebox must match every
filter given.</p>
<ul>
<li><code>id</code>: jukebox id, repeat for several ids</li>
<li><code>model</code>: model name, repeat for several models</li>
<li><code>settingid</code>: only jukeboxes whose components satisfy this setting</li>
<li><code>offset</code>: number of matching jukeboxes to skip (default 0)</li>
<li><code>limit</code>: maximum number of jukeboxes to return</li>
</ul>
<p>Example: <code>/api?model=fusion&amp;limit=5</code></p>
<p>See <a href="/docs">/docs</a> for the full API.</p>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home() -> HTMLResponse:
    return HTMLResponse(HELP_PAGE)
