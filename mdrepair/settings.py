
import os, yaml, copy, logging
from dataclasses import fields
from .config import RepairConfig

ENV_PREFIX = "MDREPAIR_"

def _deep_update(base: dict, over: dict) -> dict:
    out = copy.deepcopy(base) if isinstance(base, dict) else {}
    for k, v in (over or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_update(out[k], v)
        else:
            out[k] = v
    return out

def _coerce(raw: str, like):
    if isinstance(like, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    return raw

def load_settings(default_path: str = "config/settings.yaml"):
    with open(default_path, "r", encoding="utf-8") as f:
        base = yaml.safe_load(f) or {}
    # local override
    local_path = os.path.join(os.path.dirname(default_path), "settings.local.yaml")
    if os.path.exists(local_path):
        with open(local_path, "r", encoding="utf-8") as f:
            local = yaml.safe_load(f) or {}
        base = _deep_update(base, local)

    # env override (optional): MDREPAIR_PARSER, MDREPAIR_LOG_LEVEL, ...
    conv = base.get("conversion")
    if not isinstance(conv, dict):
        conv = base["conversion"] = {}
    defaults = RepairConfig()
    for f in fields(RepairConfig):
        val = os.environ.get(ENV_PREFIX + f.name.upper())
        if val is not None:
            conv[f.name] = _coerce(val, getattr(defaults, f.name))
    return base

def build_config(settings: dict) -> RepairConfig:
    conv = (settings or {}).get("conversion") or {}
    known = {f.name for f in fields(RepairConfig)}
    unknown = sorted(set(conv) - known)
    if unknown:
        raise ValueError(f"Unknown conversion setting(s): {', '.join(unknown)}")
    return RepairConfig(**conv)

def resolve_log_level(name) -> int:
    # blank "log_level:" in yaml loads as None
    return getattr(logging, str(name or "INFO").upper(), logging.INFO)
