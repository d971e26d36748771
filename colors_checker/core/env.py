"""Environment and settings for colors-tool.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read after loading:
  COLORS_TOOL_FORMAT     default output format: table, csv or json
  COLORS_TOOL_SEPARATOR  name/hex separator in colour files (default: whitespace)

Command-line flags override both.
"""

import os
from dataclasses import dataclass
from pathlib import Path

OUTPUT_FORMATS = ('table', 'csv', 'json')

FORMAT_VAR = 'COLORS_TOOL_FORMAT'
SEPARATOR_VAR = 'COLORS_TOOL_SEPARATOR'


@dataclass(frozen=True)
class Settings:
    output_format: str = 'table'
    separator: str | None = None  # None = any run of whitespace


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings() -> Settings:
    """Build Settings from COLORS_TOOL_* variables."""
    output_format = os.environ.get(FORMAT_VAR, '').strip().lower() or 'table'
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f'{FORMAT_VAR} must be one of {", ".join(OUTPUT_FORMATS)}, got {output_format!r}')
    # Empty string means "unset" so whitespace splitting stays the default
    separator = os.environ.get(SEPARATOR_VAR) or None
    return Settings(output_format=output_format, separator=separator)
