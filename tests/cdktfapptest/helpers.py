import json
import shutil
from pathlib import Path


def has_terraform():
    return shutil.which("terraform") is not None


def read_manifest(outdir: str | Path) -> dict:
    with open(Path(outdir) / "manifest.json") as f:
        return json.load(f)


SETTINGS_ENV_VARS = (
    "CDKTF_APP_STACK_NAME",
    "CDKTF_APP_OUTDIR",
    "CDKTF_APP_EXTRA_TAGS_STR",
    "CDKTF_OUTDIR",
)


def clear_settings_env_vars(monkeypatch) -> None:
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
