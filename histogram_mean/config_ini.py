import re

DEFAULT_LABEL = "distribution"
DEFAULT_PRECISION = 4


def _unquote(s: str) -> str:
    if (s.startswith('"') and s.endswith('"')) or (s.startswith("'") and s.endswith("'")):
        return s[1:-1].strip()
    return s


def _ini_value_to_float(v: str):
    """Best-effort parse of numeric-ish values from a report config.

    Handles:
      - plain floats/ints ("4", "0.5")
      - nil/none ("nil", "none" -> None)
      - quoted strings

    Returns float or None.
    """
    if v is None:
        return None
    s = str(v).strip()
    if not s:
        return None
    if s.lower() in ("nil", "none"):
        return None
    s = _unquote(s)
    try:
        return float(s)
    except ValueError:
        return None


def parse_config_ini(path: str) -> dict:
    """Parse a `key = value` config file into a dict (raw strings).

    Lines starting with `#` are treated as comments.
    """
    out: dict[str, str] = {}
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        for line in f:
            line = line.rstrip("\n")
            if not line or line.lstrip().startswith('#'):
                continue
            m = re.match(r'^([^=]+?)\s*=\s*(.*)$', line)
            if not m:
                continue
            k = m.group(1).strip()
            v = m.group(2).strip()
            out[k] = v
    return out


def config_get_int(cfg: dict, key: str):
    v = _ini_value_to_float(cfg.get(key))
    if v is None or not v.is_integer():
        return None
    return int(v)


def config_get_float_list(cfg: dict, key: str) -> list[float]:
    """Comma separated numbers; unparsable entries are dropped."""
    raw = cfg.get(key)
    if not raw:
        return []
    out = []
    for part in _unquote(raw.strip()).split(","):
        v = _ini_value_to_float(part)
        if v is not None:
            out.append(v)
    return out


def load_report_config(path: str) -> dict:
    """Report defaults from a config file, falling back to built-ins."""
    cfg = parse_config_ini(path)
    label = _unquote((cfg.get("label") or "").strip())
    precision = config_get_int(cfg, "precision")
    return {
        "label": label or DEFAULT_LABEL,
        "precision": precision if precision is not None and precision >= 0 else DEFAULT_PRECISION,
        "quantiles": config_get_float_list(cfg, "quantiles"),
    }
