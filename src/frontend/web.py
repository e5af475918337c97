from __future__ import annotations
import argparse
import logging
from html import escape
from flask import Flask, request, jsonify, Response
from notehint.engine import Engine
from . import initialize, prefix_instructions

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    if _engine is None:
        return jsonify({"error": "engine not initialized"}), 503
    result = _engine.complete(q)
    # null tells the page to hide the hint
    return jsonify(result.to_dict() if result else None)

@app.get("/api/health")
def api_health():
    return jsonify({"ok": _engine is not None})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: one input, the hint, the matching notes. No external deps.
    debounce = _engine.config.debounce_ms if _engine else 200
    prefixes = ", ".join(prefix_instructions(_engine.config)) if _engine else ""
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>New note • existing notes hint</title>
<style>
body{ margin:0; background:#0b0f14; color:#cfd8e3; font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial }
.container{ max-width:720px; margin:24px auto; padding:0 16px }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid #1c2530; background:#0b1117; color:#cfd8e3; font-size:16px }
.hint{ display:none; margin-top:10px; color:#8a94a6 }
.count{ color:#6ee7ff; font-weight:600 }
.item{ padding:8px 12px; border-top:1px solid #1c2530 }
.path{ color:#8a94a6; font-size:13px; margin-left:8px }
.muted{ color:#8a94a6; font-size:13px; margin-top:12px }
</style>
</head>
<body>
  <div class="container">
    <input id="q" type="text" placeholder="Note title…" autocomplete="off" autofocus />
    <div id="hint" class="hint"></div>
    <div id="out"></div>
    <div class="muted">Prefixed folders: __PREFIXES__</div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), hint = $("#hint"), out = $("#out");
const esc = (s) => String(s).replace(/[&<>"]/g, (c)=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));

let t; // debounce timer
function hide(){ hint.style.display = "none"; out.innerHTML = ""; }

async function search(value){
  const resp = await fetch(`/api/complete?q=${encodeURIComponent(value)}`);
  if(!resp.ok){ hide(); return; }
  const data = await resp.json();
  if(!data || data.total === 0){ hide(); return; }
  hint.style.display = "block";
  hint.innerHTML = `<span class="count">${data.total}</span> existing note(s) found matching "${esc(data.search_term)}"`;
  out.innerHTML = data.matches.map((m)=>
    `<div class="item">${esc(m.display_name)}<span class="path">${esc(m.path)}</span></div>`).join("")
    + (data.truncated_count > 0 ? `<div class="item path">... and ${data.truncated_count} more</div>` : "");
}

q.addEventListener("input", ()=>{
  clearTimeout(t);
  const value = q.value;
  t = setTimeout(()=>search(value), __DEBOUNCE__);
});
</script>
</body>
</html>
"""
    html = html.replace("__DEBOUNCE__", str(debounce)).replace("__PREFIXES__", escape(prefixes or "(none)"))
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the hint engine")
    ap.add_argument("--vault", required=True)
    ap.add_argument("--settings", default=None)
    ap.add_argument("--prefix", action="append", default=None)
    ap.add_argument("-k", "--limit", type=int, default=None)
    ap.add_argument("--legacy", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = initialize(args.vault, settings=args.settings, prefixes=args.prefix,
                         limit=args.limit, legacy=args.legacy, verbose=args.verbose)
    logging.getLogger(__name__).info("Serving on http://%s:%d", args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
