"""Indented JSON responses — every JSON body is pretty-printed with a 3-space indent."""

import json
from typing import Any

from fastapi.responses import JSONResponse


class IndentedJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=3,
            separators=(",", ": "),
        ).encode("utf-8")
