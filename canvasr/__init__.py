# ruff: noqa: I001
from .__version__ import __description__, __title__, __version__  # noqa: F401
from ._exceptions import (  # noqa: F401
    CanvasError,
    ConfigError,
    DecodeFailure,
    InvalidBaseURL,
    LinkHeaderError,
    MalformedLinkHeader,
    MissingLinkHeader,
    MissingToken,
    RequestFailure,
)
from ._links import format_link_header, parse_link_header  # noqa: F401
from ._page import Page  # noqa: F401
from ._paginate import AsyncPaginator, Paginator  # noqa: F401
from ._config import CanvasBuilder, CanvasConfig  # noqa: F401
from ._client import AsyncCanvas, Canvas, build_page  # noqa: F401
from . import api, models  # noqa: F401
from .api import AsyncCourseHandler, CourseHandler  # noqa: F401
from .models import Course  # noqa: F401

try:
    from .cli import main
except ImportError:

    def main() -> None:  # type: ignore[misc]
        import sys

        print(
            'The "canvasr" command requires the CLI extra. '
            'Install it with: pip install "canvasr[cli]"',
            file=sys.stderr,
        )
        sys.exit(1)


_EXCLUDED_FROM_ALL = {"cli", "main"}

__all__ = sorted(  # pyright: ignore[reportUnsupportedDunderAll]
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)
