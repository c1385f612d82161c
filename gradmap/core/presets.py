"""JSON-file preset store.

The file holds an ordered JSON array of records:

    [{"colors": "000000,FF0000,FFFF00"}, {"colors": "#112233-10 #FFFFFF-90"}]

`colors` is the raw stop text exactly as typed; it is re-parsed on use,
never normalised on save. A missing file reads as an empty store.
"""

import json
import os
from pathlib import Path

from gradmap.core.env import ENV_PRESETS

DEFAULT_PATH = Path('~/.gradmap/presets.json')


class PresetError(ValueError):
    """The preset file exists but does not hold a list of {"colors": str} records."""


def default_path() -> Path:
    """Store location: $GRADMAP_PRESETS, else ~/.gradmap/presets.json."""
    return Path(os.environ.get(ENV_PRESETS) or DEFAULT_PATH).expanduser()


class PresetStore:
    def __init__(self, path: str | Path | None = None):
        self.path = Path(path).expanduser() if path else default_path()

    def load(self) -> list[dict[str, str]]:
        if not self.path.is_file():
            return []
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except UnicodeDecodeError as exc:
            raise PresetError(f'{self.path}: not UTF-8 text') from exc
        except json.JSONDecodeError as exc:
            raise PresetError(f'{self.path}: invalid JSON ({exc.msg})') from exc
        if not isinstance(data, list):
            raise PresetError(f'{self.path}: expected a JSON array of presets')
        for i, record in enumerate(data):
            if not isinstance(record, dict) or not isinstance(record.get('colors'), str):
                raise PresetError(f'{self.path}: preset {i} has no "colors" string')
        return [{'colors': record['colors']} for record in data]

    def save(self, presets: list[dict[str, str]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(presets, indent=2) + '\n', encoding='utf-8')

    def get(self, index: int) -> str:
        presets = self.load()
        if not 0 <= index < len(presets):
            raise IndexError(f'no preset {index} (have {len(presets)})')
        return presets[index]['colors']

    def add(self, colors: str) -> int:
        """Append a preset. Returns its index."""
        presets = self.load()
        presets.append({'colors': colors})
        self.save(presets)
        return len(presets) - 1

    def remove(self, index: int) -> str:
        """Delete a preset. Returns the removed colors text."""
        presets = self.load()
        if not 0 <= index < len(presets):
            raise IndexError(f'no preset {index} (have {len(presets)})')
        removed = presets.pop(index)
        self.save(presets)
        return removed['colors']
