"""Interactive live view of a sketch served in the browser.

The live backend renders a sketch to SVG and returns a :class:`LiveView`
handle. The handle owns a Litestar application that serves the drawing and
keeps serving until the process stops; calling :meth:`LiveView.update` swaps
in a newer sketch and open pages reload it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

import structlog
from litestar import Controller, Litestar, MediaType, Response, get
from litestar.di import Provide
from litestar.status_codes import HTTP_500_INTERNAL_SERVER_ERROR

from sketch_py.config import SketchConfig
from sketch_py.core.logging import RequestLoggingMiddleware
from sketch_py.exceptions import BackendIOError, SketchError
from sketch_py.render.pipeline import render, replay_order
from sketch_py.render.svg import SvgBackend, SvgContext, escape_xml

if TYPE_CHECKING:
    from litestar import Request

    from sketch_py.core.sketch import Sketch
    from sketch_py.render.base import DrawContext

logger = structlog.get_logger(__name__)

POLL_INTERVAL_MS = 1000

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>body {{ margin: 0; display: flex; justify-content: center; background: #2b2b2b; }}</style>
</head>
<body>
  <img id="sketch" src="/sketch.svg?v={revision}" width="{width}" height="{height}" alt="{title}">
  <script>
    let revision = {revision};
    setInterval(async () => {{
      const response = await fetch("/api/sketch");
      const data = await response.json();
      if (data.revision !== revision) {{
        revision = data.revision;
        document.title = data.title;
        document.getElementById("sketch").src = "/sketch.svg?v=" + revision;
      }}
    }}, {interval});
  </script>
</body>
</html>
"""


def describe_items(sketch: Sketch) -> list[dict[str, Any]]:
    """Summarize a sketch's items in replay order."""
    described = []
    for item_id in replay_order(sketch):
        item = sketch.items[item_id]
        kind = getattr(item, "kind", None)
        described.append({"id": item_id, "kind": str(kind) if kind else type(item).__name__})
    return described


class LiveView:
    """Long-lived handle to a sketch being served in the browser.

    Attributes:
        sketch: The sketch currently shown.
        svg: SVG markup of the current sketch.
        config: Host, port and logging settings.
        revision: Incremented every time the sketch is replaced.
    """

    def __init__(self, sketch: Sketch, svg: str, config: SketchConfig | None = None) -> None:
        self.sketch = sketch
        self.svg = svg
        self.config = config or SketchConfig()
        self.revision = 1
        self._app: Litestar | None = None

    @property
    def app(self) -> Litestar:
        """The Litestar application serving this view."""
        if self._app is None:
            self._app = create_app(self)
        return self._app

    def update(self, sketch: Sketch) -> None:
        """Show ``sketch`` instead of the current one."""
        self.svg = render(sketch, SvgBackend())
        self.sketch = sketch
        self.revision += 1
        logger.info("Live view updated", title=sketch.title, revision=self.revision)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "title": self.sketch.title,
            "width": self.sketch.width,
            "height": self.sketch.height,
            "background": self.sketch.background.to_hex(),
            "revision": self.revision,
            "items": describe_items(self.sketch),
        }

    def serve(self) -> None:
        """Serve the view until interrupted. Blocks the calling thread."""
        import uvicorn

        logger.info("Serving live view", host=self.config.host, port=self.config.port, title=self.sketch.title)
        uvicorn.run(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level="debug" if self.config.debug else "warning",
        )


class LiveViewController(Controller):
    """Endpoints that expose the live view."""

    path = "/"
    tags: ClassVar[list[str]] = ["Live view"]

    @get("/", media_type=MediaType.HTML)
    async def index(self, view: LiveView) -> str:
        """Return the HTML page that displays and refreshes the sketch."""
        return PAGE_TEMPLATE.format(
            title=escape_xml(view.sketch.title),
            width=view.sketch.width,
            height=view.sketch.height,
            revision=view.revision,
            interval=POLL_INTERVAL_MS,
        )

    @get("/sketch.svg")
    async def sketch_svg(self, view: LiveView) -> Response[str]:
        """Return the current sketch as SVG."""
        return Response(content=view.svg, media_type="image/svg+xml")

    @get("/api/sketch")
    async def sketch_summary(self, view: LiveView) -> dict[str, Any]:
        """Return the sketch canvas and its items in replay order."""
        return view.to_dict()

    @get("/health")
    async def health(self) -> dict[str, str]:
        """Health check for the live view."""
        return {"status": "healthy"}


def sketch_error_handler(request: Request, exc: SketchError) -> Response[dict[str, Any]]:
    """Report sketch errors raised while serving as JSON."""
    logger.error("Live view error", path=request.url.path, error=str(exc), error_type=type(exc).__name__)
    return Response(
        content={"error": type(exc).__name__, "detail": str(exc)},
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(view: LiveView) -> Litestar:
    """Create the Litestar application serving ``view``."""

    def provide_view() -> LiveView:
        return view

    return Litestar(
        route_handlers=[LiveViewController],
        dependencies={"view": Provide(provide_view, sync_to_thread=False)},
        exception_handlers={SketchError: sketch_error_handler},
        middleware=[RequestLoggingMiddleware],
        debug=view.config.debug,
    )


class LiveBackend:
    """Interactive backend; its result is a :class:`LiveView` handle.

    Example:
        >>> view = sketch.render(LiveBackend())  # doctest: +SKIP
        >>> view.serve()  # doctest: +SKIP
    """

    name = "live"

    def __init__(self, config: SketchConfig | None = None) -> None:
        self.config = config or SketchConfig()

    def open(self, sketch: Sketch) -> SvgContext:
        return SvgContext(sketch)

    def finalize(self, context: DrawContext) -> LiveView:
        if not isinstance(context, SvgContext):
            msg = f"{self.name} backend cannot finalize a {context.name} context"
            raise BackendIOError(msg)
        return LiveView(sketch=context.sketch, svg=context.to_svg(), config=self.config)
