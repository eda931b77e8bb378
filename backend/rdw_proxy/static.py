import os
from typing import Optional, Tuple

from fastapi.staticfiles import StaticFiles


class PublicFiles(StaticFiles):
    """
    StaticFiles that also resolves extension-less paths to "<path>.html",
    so /lookup serves lookup.html.
    """

    def lookup_path(self, path: str) -> Tuple[str, Optional[os.stat_result]]:
        full_path, stat_result = super().lookup_path(path)
        if stat_result is None and path and not os.path.splitext(path)[1]:
            return super().lookup_path(path.rstrip("/") + ".html")
        return full_path, stat_result
