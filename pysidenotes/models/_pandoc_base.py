from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "allow") -> str:
    """
    Pick how the pandoc envelope treats unknown top-level keys.

    Read from PYSIDENOTES_EXTRA (allow|forbid|ignore); "true/1/on/strict"
    mean forbid, "false/0/off/lenient" mean allow. Anything else falls back
    to ``default``.
    """
    raw = (os.getenv("PYSIDENOTES_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "allow"

    return default


_EXTRA = _env_extra_mode()


class PandocModel(BaseModel):
    """
    Base for pandoc JSON envelope models.

    With the default 'allow', keys pandoc adds next to ``pandoc-api-version``,
    ``meta`` and ``blocks`` are kept in ``model_extra`` and written back by
    the encoder. 'forbid' rejects such documents; 'ignore' drops the keys.
    The mode is read once, when this module is imported.
    """

    model_config = ConfigDict(
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
        populate_by_name=True,
    )


__all__ = ["PandocModel", "_env_extra_mode"]
