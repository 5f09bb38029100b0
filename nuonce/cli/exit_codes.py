from __future__ import annotations

EXIT_SUCCESS = 0
