"""
write_load.py — async load script that shortens URLs via POST /api/shorten

Usage:
  python write_load.py --base http://127.0.0.1:3000 --count 2000 --concurrency 100 --out shortlinks_created.jsonl

Every created (201) or deduplicated (200) code is appended to --out as
{"code": ..., "url": ...} so read_load.py can replay redirects against it.
--dup-ratio re-submits already-sent URLs to exercise the dedupe path.
"""
import argparse
import asyncio
import json
import random
import string
import time
from datetime import datetime, timezone

import httpx


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _rand_url(idx: int) -> str:
    host = random.choice(["example", "sample", "demo", "alpha"]) + "." + random.choice(["com", "net", "org", "io"])
    path = "".join(random.choice(string.ascii_letters + string.digits) for _ in range(8))
    return f"https://{host}/{path}?q={idx}"


async def _shorten(client: httpx.AsyncClient, base: str, url: str):
    """Return (status_code, shortCode) or (None, None) on transport failure."""
    try:
        r = await client.post(f"{base}/api/shorten", json={"url": url}, timeout=10)
    except httpx.HTTPError:
        return None, None
    if r.status_code not in (200, 201):
        return r.status_code, None
    return r.status_code, r.json().get("shortCode")


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:3000")
    parser.add_argument("--count", type=int, default=2000)
    parser.add_argument("--concurrency", type=int, default=100)
    parser.add_argument("--dup-ratio", type=float, default=0.0, help="share of requests re-sending a known URL")
    parser.add_argument("--out", default="shortlinks_created.jsonl")
    args = parser.parse_args()

    sent = []
    counts = {"created": 0, "existing": 0, "fail": 0}

    start_iso = _now_iso()
    t0 = time.perf_counter()

    limits = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    with open(args.out, "w", encoding="utf-8") as out_f:
        async with httpx.AsyncClient(limits=limits) as client:
            sem = asyncio.Semaphore(args.concurrency)

            async def _task(i):
                url = random.choice(sent) if sent and random.random() < args.dup_ratio else _rand_url(i)
                sent.append(url)
                async with sem:
                    status, code = await _shorten(client, args.base, url)
                if code is None:
                    counts["fail"] += 1
                    return
                counts["created" if status == 201 else "existing"] += 1
                out_f.write(json.dumps({"code": code, "url": url}) + "\n")

            await asyncio.gather(*(_task(i) for i in range(args.count)))

    dt = time.perf_counter() - t0
    ok = counts["created"] + counts["existing"]
    print(f"START: {start_iso}")
    print(f"END:   {_now_iso()}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   writes={args.count}, created={counts['created']}, existing={counts['existing']}, fail={counts['fail']}")
    if dt > 0:
        print(f"TPS:   {ok/dt:.1f} req/s")


if __name__ == "__main__":
    asyncio.run(main())
