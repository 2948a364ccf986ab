from __future__ import annotations

import os
from pathlib import Path
from typing import Any


def config_file_path(base_dir: str | os.PathLike[str], file_name: str) -> Path:
    return (Path(base_dir) / file_name).absolute()


def files_dir_of(context: Any) -> Path:
    # host contexts expose their private storage dir under either spelling
    for attr in ("files_dir", "filesDir"):
        d = getattr(context, attr, None)
        if d:
            return Path(d)
    raise ValueError(f"context has no files_dir: {context!r}")
