"""Early bootstrapping when `apps/` is on `sys.path`.

Python imports this module at startup if it is found on `sys.path` (see the
`site` module). It loads environment variables from `.env` files
(package-local first, then repo root) so `INFRA_API_BASE_URLS` and friends
are visible before `infra_research.core.config` builds its settings.

Guarded by `INFRA_ENV_LOADED` so repeated imports do not reload the file.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def _load_env_once() -> None:
    if os.environ.get("INFRA_ENV_LOADED") == "1":
        return

    apps_dir = Path(__file__).resolve().parent
    pkg_env = apps_dir / "infra_research" / ".env"
    root_env = apps_dir.parent / ".env"

    if pkg_env.exists():
        load_dotenv(pkg_env)
    elif root_env.exists():
        load_dotenv(root_env)
    os.environ["INFRA_ENV_LOADED"] = "1"


_load_env_once()
