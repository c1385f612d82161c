"""Configuration from environment variables and .env files.

Settings read by gradmap:
  GRADMAP_COLORS   default gradient text when a command gets none
  GRADMAP_PRESETS  preset store path (default ~/.gradmap/presets.json)
  GRADMAP_WORKERS  default thread count for `apply` (default 1)

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. The file given by --env-file, if provided.
  3. The nearest .env walking up from cwd, stopping at a .git boundary.
"""

import os
from pathlib import Path

ENV_COLORS = 'GRADMAP_COLORS'
ENV_PRESETS = 'GRADMAP_PRESETS'
ENV_WORKERS = 'GRADMAP_WORKERS'


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a repo root."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone, a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and malformed lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ for keys not already set.

    Returns the file that was loaded, or None.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def default_colors() -> str:
    return os.environ.get(ENV_COLORS, '')


def default_workers() -> int:
    """GRADMAP_WORKERS as a positive int; ValueError if it is not one."""
    raw = os.environ.get(ENV_WORKERS, '').strip()
    if not raw:
        return 1
    workers = int(raw)
    if workers < 1:
        raise ValueError(f'{ENV_WORKERS} must be >= 1, got {workers}')
    return workers
