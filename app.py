import math, os, random, time
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest

from mrprime import DEFAULT_ROUNDS, decompose, is_probable_prime, cross_check

MAX_ROUNDS = int(os.getenv("MR_MAX_ROUNDS", "256"))
MAX_BITS   = int(os.getenv("MR_MAX_BITS", "4096"))
# decimal digits of the largest MAX_BITS-bit number
MAX_DIGITS = math.ceil(MAX_BITS * math.log10(2))

app = Flask(__name__)

@app.errorhandler(BadRequest)
def bad_request(e):
    return jsonify(ok=False, error=e.description), 400

def _parse_int(raw, name: str) -> int:
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        raise BadRequest(f"{name} must be integer")

def _mr_core(params) -> dict:
    raw_n = params.get("n")
    if raw_n is None or str(raw_n).strip() == "":
        raise BadRequest("missing n")
    digits = str(raw_n).strip().lstrip("+-").replace("_", "").lstrip("0")
    if len(digits) > MAX_DIGITS:
        raise BadRequest(f"n must be at most {MAX_BITS} bits")
    n = _parse_int(raw_n, "n")
    if n < 0:
        raise BadRequest("n must be non-negative")
    if n.bit_length() > MAX_BITS:
        raise BadRequest(f"n must be at most {MAX_BITS} bits")

    raw_rounds = params.get("rounds")
    rounds = DEFAULT_ROUNDS if raw_rounds in (None, "") else _parse_int(raw_rounds, "rounds")
    if not 1 <= rounds <= MAX_ROUNDS:
        raise BadRequest(f"rounds must be in 1..{MAX_ROUNDS}")

    raw_seed = params.get("seed")
    rng = random.SystemRandom() if raw_seed in (None, "") else random.Random(_parse_int(raw_seed, "seed"))

    t0 = time.perf_counter()
    verdict = is_probable_prime(n, rounds, rng)
    dt_ms = int((time.perf_counter() - t0) * 1000)
    builtin = cross_check(n)
    if verdict != builtin:
        app.logger.warning("MR verdict %s disagrees with library check for n=%d (k=%d)", verdict, n, rounds)

    out = {
        "ok": True,
        "n": str(n),
        "bits": n.bit_length(),
        "rounds": rounds,
        "probable_prime": verdict,
        "builtin": builtin,
        "duration_ms": dt_ms,
        "pretty": f"{n} -> MR={verdict} (k={rounds}) | builtin={builtin}",
    }
    if n > 3 and n % 2 == 1:
        d, s = decompose(n)
        out.update(d=str(d), s=s)
    return out

@app.get("/api/health")
def api_health():
    return jsonify(ok=True, default_rounds=DEFAULT_ROUNDS, max_rounds=MAX_ROUNDS, max_bits=MAX_BITS)

# POST JSON: {"n": "97", "rounds": 5, "seed": 1}
@app.post("/api/mr")
def api_mr():
    data = request.get_json(force=True, silent=True) or {}
    if not isinstance(data, dict):
        raise BadRequest("JSON object expected")
    return jsonify(_mr_core(data))

# GET /api/mr?n=97&rounds=5
@app.get("/api/mr")
def api_mr_query():
    return jsonify(_mr_core(request.args))

if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8080)
