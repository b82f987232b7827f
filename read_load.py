"""
read_load.py — async load script that replays redirects

Usage:
  python read_load.py --base http://127.0.0.1:3000 --in shortlinks_created.jsonl --count 15000 --concurrency 200

Issues GET /{code} without following redirects and counts 302 responses.
Afterwards, --verify compares each sampled code's visitCount (via
/api/analytics/{code}) with the number of successful hits sent to it.
"""
import argparse
import asyncio
import json
import random
import time
from collections import Counter
from datetime import datetime, timezone

import httpx


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _load_codes(path):
    codes = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            code = json.loads(line).get("code")
            if code:
                codes.append(code)
    return codes


async def _hit(client: httpx.AsyncClient, base: str, code: str) -> bool:
    try:
        r = await client.get(f"{base}/{code}", follow_redirects=False, timeout=10)
    except httpx.HTTPError:
        return False
    return r.status_code == 302


async def _verify(client: httpx.AsyncClient, base: str, hits: Counter) -> int:
    """Return the number of codes whose visitCount is lower than the hits we sent."""
    short = 0
    for code, sent in hits.items():
        r = await client.get(f"{base}/api/analytics/{code}", timeout=10)
        if r.status_code != 200 or r.json()["visitCount"] < sent:
            short += 1
    return short


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:3000")
    parser.add_argument("--in", dest="codes_file", default="shortlinks_created.jsonl")
    parser.add_argument("--count", type=int, default=15000)
    parser.add_argument("--concurrency", type=int, default=200)
    parser.add_argument("--verify", action="store_true", help="check visit counters afterwards")
    args = parser.parse_args()

    codes = _load_codes(args.codes_file)
    if not codes:
        print(f"No codes found in {args.codes_file}. Run write_load.py first.")
        return

    hits: Counter = Counter()
    start_iso = _now_iso()
    t0 = time.perf_counter()

    limits = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    async with httpx.AsyncClient(limits=limits) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task(_):
            code = random.choice(codes)
            async with sem:
                if await _hit(client, args.base, code):
                    hits[code] += 1

        await asyncio.gather(*(_task(i) for i in range(args.count)))
        dt = time.perf_counter() - t0

        success = sum(hits.values())
        print(f"START: {start_iso}")
        print(f"END:   {_now_iso()}")
        print(f"TOTAL: {dt:.3f} s")
        print(f"OPS:   reads={args.count}, ok={success}, fail={args.count - success}")
        if dt > 0:
            print(f"RPS:   {success/dt:.1f} req/s")

        if args.verify:
            short = await _verify(client, args.base, hits)
            print(f"VERIFY: {len(hits)} codes checked, {short} with fewer visits than hits")


if __name__ == "__main__":
    asyncio.run(main())
