import os
import sys
import json
import requests

BASE_URL = os.environ.get("SMOKE_URL") or os.environ.get("DEV_URL", "http://127.0.0.1:5002")
API = f"{BASE_URL.rstrip('/')}/api"

SAMPLE_JUDGMENT = (
    "IN THE HIGH COURT OF DELHI\n"
    "Criminal Appeal No. 123 of 2020\n"
    "Raj Kumar\n...Petitioner\nVERSUS\nState of Delhi\n...Respondent\n"
    "Dated: 5th March, 2020\n"
    "1. The FIR was registered under Section 302 of the Indian Penal Code.\n"
    "2. Whether the appellant is entitled to bail under Section 439 of the Code of Criminal Procedure?\n"
    "3. Learned counsel for the appellant submitted that the incident occurred at night.\n"
)

SAMPLE_CASE = "The applicant is a first-time offender with a medical condition seeking bail under Section 437."

def get(path: str):
    r = requests.get(f"{API}{path}", timeout=10)
    r.raise_for_status()
    return r

def post(path: str, payload: dict):
    r = requests.post(f"{API}{path}", json=payload, timeout=20)
    r.raise_for_status()
    return r

def main():
    print(f"[smoke] Target: {API}")
    print("[smoke] /health:", get("/health").status_code)
    print("[smoke] /version:", get("/version").status_code)

    r = post("/extract", {"text": SAMPLE_JUDGMENT})
    print("[smoke] /extract:", r.status_code, json.dumps(r.json().get("meta"), indent=2))

    r = post("/bail/assess", {"text": SAMPLE_CASE, "format": "minimal"})
    print("[smoke] /bail/assess:", r.status_code, json.dumps(r.json()))

if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("[smoke] FAILED:", e)
        sys.exit(1)
