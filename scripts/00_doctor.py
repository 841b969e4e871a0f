import sys, os, importlib, yaml
REQ = ["yaml","pandas","tqdm"]
def check_mod(m):
    try:
        importlib.import_module(m)
        print(f"[doctor] dep {m}: OK")
        return True
    except ImportError as e:
        print(f"[doctor] dep {m}: MISSING ({e})")
        return False
def main():
    print(f"[doctor] Python: {sys.version.split()[0]}")
    ok = True
    for m in REQ:
        ok &= check_mod(m)
    for k in ["MDREPAIR_PARSER","MDREPAIR_PATTERN","MDREPAIR_LOG_LEVEL"]:
        print(f"[doctor] env {k}: {os.getenv(k) or 'unset'}")
    for name in ("settings.yaml", "settings.local.yaml"):
        cfg_path = os.path.join("config", name)
        if not os.path.exists(cfg_path):
            print(f"[doctor] {name}: NOT FOUND")
            continue
        try:
            with open(cfg_path, encoding="utf-8") as f:
                cfg = yaml.safe_load(f) or {}
            conv = cfg.get("conversion") or {}
            print(f"[doctor] {name}: FOUND (parser={conv.get('parser') or 'identity'} pattern={conv.get('pattern')})")
        except (OSError, yaml.YAMLError) as e:
            print(f"[doctor] {name}: READ ERROR {e}")
            ok = False
    if ok:
        try:
            from mdrepair.settings import load_settings, build_config
            from mdrepair.pipeline import resolve_parser
            resolve_parser(build_config(load_settings()))
            print("[doctor] parser: OK")
        except Exception as e:
            print(f"[doctor] parser: ERROR {e}")
            ok = False
    if not ok:
        print("[doctor] Problems found. Try: pip install -e .")
        return 1
    return 0
if __name__ == "__main__":
    raise SystemExit(main())
