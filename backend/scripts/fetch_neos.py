import sys
import os
sys.path.append(os.getcwd())

import argparse
import asyncio
import json
import logging

from app.services.nasa_neows import fetch_asteroids, summarize_asteroid_risk

logging.basicConfig(level=logging.INFO)

async def run(start_date: str, end_date: str, summary: bool):
    if summary:
        result = await summarize_asteroid_risk(start_date, end_date)
    else:
        result = await fetch_asteroids(start_date, end_date)
    print(json.dumps(result.model_dump(by_alias=True, mode="json"), indent=2))

def main():
    ap = argparse.ArgumentParser(description="Fetch NASA NeoWs objects with risk levels.")
    ap.add_argument("start_date", help="YYYY-MM-DD")
    ap.add_argument("end_date", help="YYYY-MM-DD")
    ap.add_argument("--summary", action="store_true", help="print risk counts and top HIGH objects")
    args = ap.parse_args()

    asyncio.run(run(args.start_date, args.end_date, args.summary))

if __name__ == "__main__":
    main()
