import httpx
import time
import sys
import subprocess
import os
from datetime import date, timedelta

BASE = "http://127.0.0.1:8000"
RANK = {"HIGH": 3, "MEDIUM": 2, "LOW": 1}

def check_backend():
    try:
        r = httpx.get(f"{BASE}/health", timeout=2)
        return r.status_code == 200
    except httpx.HTTPError:
        return False

def start_backend():
    print("Starting temporary backend...")
    p = subprocess.Popen([sys.executable, "-m", "uvicorn", "app.main:app", "--host", "0.0.0.0", "--port", "8000"],
                         cwd=os.path.join(os.getcwd(), "backend"),
                         stdout=subprocess.PIPE,
                         stderr=subprocess.PIPE)
    for i in range(20):
        if check_backend():
            print("Backend started.")
            return p
        time.sleep(1)
    print("Backend failed to start.")
    return None

def verify_feed():
    end = date.today()
    start = end - timedelta(days=2)
    params = {"startDate": start.isoformat(), "endDate": end.isoformat()}
    try:
        print(f"Requesting NEO feed {params['startDate']}..{params['endDate']}...")
        start_time = time.time()
        r = httpx.get(f"{BASE}/api/v1/asteroids/feed", params=params, timeout=30)
        duration = time.time() - start_time

        if r.status_code != 200:
            print(f"Failed: Status {r.status_code}")
            print(r.text)
            return

        data = r.json()
        print(f"Success! {data['count']} objects in {duration:.2f}s")

        if data["asteroids"]:
            a = data["asteroids"][0]
            print(f"\nTop object:")
            print(f"  {a['name']} ({a['id']}) on {a['closeApproachDate']}")
            print(f"  Diameter: {a['diameterMeters']:.1f} m, Velocity: {a['relativeVelocityKps']:.2f} km/s")
            print(f"  Miss distance: {a['missDistanceKm']:.0f} km, Risk Level: {a['riskLevel']}")

            keys = [(RANK[x["riskLevel"]], x["diameterMeters"]) for x in data["asteroids"]]
            if keys == sorted(keys, reverse=True):
                print("\n[PASS] Feed is sorted by risk level, then diameter.")
            else:
                print("\n[FAIL] Feed is NOT sorted by risk.")

        r = httpx.get(f"{BASE}/api/v1/asteroids/summary", params=params, timeout=30)
        summary = r.json()
        print(f"\nSummary: total={summary['total']} byRisk={summary['byRisk']}")
        if sum(summary["byRisk"].values()) == summary["total"]:
            print("[PASS] Risk counts add up to total.")
        else:
            print("[FAIL] Risk counts do not add up.")

    except Exception as e:
        print(f"Test failed with exception: {e}")

if __name__ == "__main__":
    server_process = None
    if not check_backend():
        server_process = start_backend()

    if check_backend():
        verify_feed()
    else:
        print("Could not connect to backend.")

    if server_process:
        print("Stopping temporary backend...")
        server_process.terminate()
