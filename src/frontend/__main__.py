from __future__ import annotations
import argparse, json, os, sys
from . import initialize, complete, format_hint, prefix_instructions

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Existing-notes hint REPL")
    parser.add_argument("--vault", required=True, help="Vault folder to scan for .md notes")
    parser.add_argument("--settings", default=None, help="JSON settings file (plugin data.json)")
    parser.add_argument("--prefix", action="append", default=None, help="Folder prefix token (repeatable)")
    parser.add_argument("-k", "--limit", type=int, default=None, help="Result limit")
    parser.add_argument("--legacy", action="store_true", help="Plain substring matching instead of tiers")
    parser.add_argument("--q", default=None, help="Single query to run once")
    parser.add_argument("--json", action="store_true", help="Emit JSON results")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        os.environ["NOTEHINT_VERBOSE"] = "1"

    engine = initialize(args.vault, settings=args.settings, prefixes=args.prefix,
                        limit=args.limit, legacy=args.legacy, verbose=args.verbose)

    def run_query(q: str) -> None:
        result = complete(q)
        if args.json:
            print(json.dumps(result.to_dict() if result else None, ensure_ascii=False, indent=2))
            return
        lines = format_hint(result)
        if not lines:
            print(_c("(no existing notes)", "2;37")); return
        print(_c(lines[0], "1;37"))
        for line in lines[1:]:
            print(line)

    try:
        if args.q is not None:
            run_query(args.q)
            return 0

        hints = prefix_instructions(engine.config)
        if hints:
            print(_c("Prefixed folders: " + ", ".join(repr(h) for h in hints), "2;37"))
        print("Type a note title and press Enter (empty to quit).")
        while True:
            try:
                raw = input("> ")
            except (EOFError, KeyboardInterrupt):
                print(); break
            if raw == "":
                break
            run_query(raw)
        return 0
    finally:
        engine.shutdown()

if __name__ == "__main__":
    sys.exit(main())
