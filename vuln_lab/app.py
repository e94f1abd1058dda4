"""VulnLab — Deliberately misconfigured CORS server for CORSCheck testing.

Each endpoint answers with a different Access-Control-Allow-Origin policy
so every verdict category (and the clean case) can be reproduced locally.
"""

from flask import Flask, request, render_template_string, make_response


# ── Shared HTML layout ──────────────────────────────────────────

_LAYOUT = """<!DOCTYPE html>
<html><head><title>VulnLab — {{ title }}</title>
<style>
body{font-family:monospace;background:#111;color:#0f0;max-width:900px;margin:0 auto;padding:2rem}
a{color:#0ff}h1{color:#f00}h2{color:#ff0}
pre{background:#1a1a1a;padding:1rem;border:1px solid #333;overflow-x:auto}
</style></head>
<body>
<h1>🔓 VulnLab</h1>
<p><a href="/">← Home</a></p>
<h2>{{ title }}</h2>
{{ content|safe }}
</body></html>
"""

_ENDPOINTS = [
    ("/wildcard", "Wildcard origin (*)"),
    ("/null", "Null origin allowed"),
    ("/reflect", "Any origin reflected"),
    ("/same-suffix", "Sibling origin under the same suffix"),
    ("/same-origin", "Own origin reflected"),
    ("/safe", "No CORS headers"),
]


def page(title, content):
    return render_template_string(_LAYOUT, title=title, content=content)


def _with_cors(title, origin=None, credentials=True):
    resp = make_response(page(title, f"<pre>Origin: {request.headers.get('Origin', '')}</pre>"))
    if origin is not None:
        resp.headers["Access-Control-Allow-Origin"] = origin
        resp.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        resp.headers["Access-Control-Allow-Headers"] = "Content-Type,Authorization"
        resp.headers["Access-Control-Expose-Headers"] = "X-Request-Id"
        resp.headers["Access-Control-Max-Age"] = "600"
        if credentials:
            resp.headers["Access-Control-Allow-Credentials"] = "true"
    return resp


def create_app():
    app = Flask(__name__)

    @app.route("/")
    def home():
        items = "".join(f'<li><a href="{path}">{label}</a></li>' for path, label in _ENDPOINTS)
        return page("Home", f"<p>Deliberately misconfigured CORS endpoints.</p><ul>{items}</ul>")

    # VULNERABLE: any origin may read responses
    @app.route("/wildcard")
    def wildcard():
        return _with_cors("Wildcard origin", "*", credentials=False)

    # VULNERABLE: sandboxed iframes and data: pages send Origin: null
    @app.route("/null")
    def null_origin():
        origin = request.headers.get("Origin")
        return _with_cors("Null origin", "null" if origin == "null" else None)

    # VULNERABLE: Origin echoed back without validation
    @app.route("/reflect")
    def reflect():
        origin = request.headers.get("Origin")
        if origin in (None, "null"):
            return _with_cors("Reflected origin")
        return _with_cors("Reflected origin", origin)

    # VULNERABLE: fixed sibling origin, trusted regardless of the caller
    @app.route("/same-suffix")
    def same_suffix():
        return _with_cors("Same suffix", f"https://partner.{request.host}")

    # Own origin echoed only for itself
    @app.route("/same-origin")
    def same_origin():
        own = f"{request.scheme}://{request.host}"
        origin = request.headers.get("Origin")
        return _with_cors("Same origin", own if origin == own else None)

    @app.route("/safe")
    def safe():
        return _with_cors("Safe")

    return app


app = create_app()


if __name__ == "__main__":
    print("\n  🔓 VulnLab starting on http://0.0.0.0:5000\n")
    app.run(host="0.0.0.0", port=5000, debug=True)
