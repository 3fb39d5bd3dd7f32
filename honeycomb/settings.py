import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 1
    STRICT_DICTIONARY: bool = True
    MAX_RESULTS: int = 0

    MAX_UPLOAD_BYTES: int = 64_000

    NOTIFY: bool = False
    NTFY_TOPIC: str = "honeycomb-solver"
    NTFY_URL: str = "https://ntfy.sh"
    NOTIFY_WORDS_PER_GROUP: int = 10

    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        # Reject JSON booleans and floats; numeric strings are accepted
        if isinstance(value, (bool, float)):
            raise TypeError(f"expected an integer, got {value!r}")
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "STRICT_DICTIONARY": bool,
    "MAX_RESULTS": int,
    "NOTIFY": bool,
    "NTFY_TOPIC": str,
    "NOTIFY_WORDS_PER_GROUP": int,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, /, **values) -> dict[str, str]:
    """Apply editable field updates. Returns {field: error} for rejected ones.

    Valid fields are applied even when others in the same call fail.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "field is not editable"
            else:
                errors[name] = "unknown field"
            continue
        try:
            new_value = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {EDITABLE_FIELDS[name].__name__}: {e}"
            continue
        if isinstance(new_value, int) and not isinstance(new_value, bool) and new_value < 0:
            errors[name] = "must not be negative"
            continue
        setattr(cfg, name, new_value)
    return errors


settings = Settings()
